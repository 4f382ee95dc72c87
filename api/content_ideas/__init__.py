"""
Generated content ideas (read-only here).
"""
