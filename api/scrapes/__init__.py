"""
Scrape runs recorded by the automation engine.
"""
