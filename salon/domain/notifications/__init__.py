"""Notifications domain - fan-out on booking events and the per-user inbox"""
