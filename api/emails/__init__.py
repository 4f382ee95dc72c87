"""
Email delivery logs.
"""
