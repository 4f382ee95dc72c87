"""
Bearer-token verification against the external auth provider.
"""
