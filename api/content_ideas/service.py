"""
Content idea listing.

The joined fetch is preferred; when it fails we fall back to the plain
fetch so the tab still renders.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from core import db
from core.errors import database_errors
from core.jsonfields import normalize_fields

from . import repository

logger = logging.getLogger(__name__)

JSON_FIELDS = ("metadata", "research_context", "content_ideas", "scrape", "intelligence")


def normalize(row: dict[str, Any]) -> dict[str, Any]:
    return normalize_fields(row, JSON_FIELDS)


async def list_for_client(client_id: UUID) -> list[dict[str, Any]]:
    try:
        rows = await repository.list_with_relations(client_id)
    except db.DB_ERRORS as exc:
        logger.warning("content_ideas_join_failed client_id=%s error=%s", client_id, exc)
        with database_errors("Failed to fetch content ideas", event="content_ideas_fetch_failed"):
            rows = await repository.list_for_client(client_id)

    return [normalize(row) for row in rows]
