"""
Ingestion endpoints called by the external automation engine.
"""
