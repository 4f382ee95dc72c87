"""
Scrape read paths, with best-effort intelligence counts.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any
from uuid import UUID

from core import db
from core.errors import ApiError, database_errors, parse_id
from core.jsonfields import normalize_fields

from . import repository

logger = logging.getLogger(__name__)

JSON_FIELDS = ("urls_scraped", "data_extracted")


def normalize(row: dict[str, Any]) -> dict[str, Any]:
    return normalize_fields(row, JSON_FIELDS)


def attach_intelligence_counts(
    scrapes: list[dict[str, Any]],
    intelligence_rows: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    counts = Counter(row["scrape_id"] for row in intelligence_rows if row.get("scrape_id") is not None)
    return [{**scrape, "intelligence_count": counts.get(scrape["id"], 0)} for scrape in scrapes]


async def list_for_client(client_id: UUID) -> list[dict[str, Any]]:
    with database_errors("Failed to fetch scrapes", event="scrapes_fetch_failed"):
        rows = await repository.list_for_client(client_id)
    scrapes = [normalize(row) for row in rows]

    scrape_ids = [s["id"] for s in scrapes if s.get("id") is not None]
    if not scrape_ids:
        return scrapes

    # Enrichment is optional: fall back to uncounted scrapes.
    try:
        intelligence_rows = await repository.intelligence_scrape_ids(scrape_ids)
    except db.DB_ERRORS as exc:
        logger.warning("intelligence_count_failed client_id=%s error=%s", client_id, exc)
        return scrapes

    return attach_intelligence_counts(scrapes, intelligence_rows)


async def get_scrape(scrape_id: UUID | str) -> dict[str, Any]:
    scrape_uuid = parse_id(scrape_id, "Scrape not found")
    with database_errors("Scrape not found", status_code=404, event="scrape_fetch_failed"):
        row = await repository.get_scrape(scrape_uuid)
    if row is None:
        raise ApiError(404, "Scrape not found")
    return normalize(row)
