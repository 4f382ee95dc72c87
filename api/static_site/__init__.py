"""
Serves the built frontend bundle with SPA fallback.
"""
