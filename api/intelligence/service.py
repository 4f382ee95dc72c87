from __future__ import annotations

from typing import Any
from uuid import UUID

from core.errors import database_errors
from core.jsonfields import normalize_fields

from . import repository

JSON_FIELDS = ("metadata",)


def normalize(row: dict[str, Any]) -> dict[str, Any]:
    return normalize_fields(row, JSON_FIELDS)


async def list_for_client(client_id: UUID, *, intelligence_type: str | None = None) -> list[dict[str, Any]]:
    with database_errors("Failed to fetch intelligence", event="intelligence_fetch_failed"):
        rows = await repository.list_for_client(client_id, intelligence_type=intelligence_type)
    return [normalize(row) for row in rows]


async def list_for_scrape(scrape_id: UUID) -> list[dict[str, Any]]:
    with database_errors("Failed to fetch intelligence", event="scrape_intelligence_fetch_failed"):
        rows = await repository.list_for_scrape(scrape_id)
    return [normalize(row) for row in rows]
