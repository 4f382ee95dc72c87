"""
Per-client delivery settings for recurring content.
"""
