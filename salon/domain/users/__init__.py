"""Users domain - profile sync with the identity provider and role management"""
