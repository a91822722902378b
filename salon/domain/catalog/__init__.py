"""Catalog domain - services, team members, promotional events and gallery"""
