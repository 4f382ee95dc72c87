"""
Derived intelligence attached to clients and scrapes.
"""
