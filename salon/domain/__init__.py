"""Business domains - one package per bounded context (router, service, repository, schemas)"""
