from __future__ import annotations

from typing import Any
from uuid import UUID

from core.errors import database_errors
from core.jsonfields import normalize_fields

from . import repository

# `recipient` may hold a JSON-encoded list when one email went to many.
JSON_FIELDS = ("recipient", "metadata")


def normalize(row: dict[str, Any]) -> dict[str, Any]:
    return normalize_fields(row, JSON_FIELDS)


async def list_for_client(client_id: UUID) -> list[dict[str, Any]]:
    with database_errors("Failed to fetch emails", event="emails_fetch_failed"):
        rows = await repository.list_for_client(client_id)
    return [normalize(row) for row in rows]
