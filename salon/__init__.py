"""Salon booking backend"""
