"""Appointments domain - booking, availability and stylist/admin management"""
