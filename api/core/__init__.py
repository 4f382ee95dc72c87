"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
settings, logging, error rendering, the outbound webhook client). Keep
entity-specific SQL and business logic in the corresponding feature package
(e.g. `clients/`).
"""
