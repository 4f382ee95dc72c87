"""
Intelligence persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db
from core.jsonfields import json_arg

INTELLIGENCE_COLUMNS = """
    id, client_id, scrape_id, intelligence_type, version,
    content, metadata, created_at
"""


async def list_for_client(client_id: UUID, *, intelligence_type: str | None = None) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {INTELLIGENCE_COLUMNS}
        FROM client_intelligence
        WHERE client_id = $1
          AND ($2::text IS NULL OR intelligence_type = $2)
        ORDER BY created_at DESC
        """,
        client_id,
        intelligence_type,
    )


async def list_for_scrape(scrape_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {INTELLIGENCE_COLUMNS}
        FROM client_intelligence
        WHERE scrape_id = $1
        ORDER BY created_at DESC
        """,
        scrape_id,
    )


async def insert_intelligence(
    *,
    client_id: UUID,
    intelligence_type: str,
    content: str | None,
    metadata: Any,
    version: int,
    scrape_id: UUID | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO client_intelligence
          (client_id, intelligence_type, content, metadata, version, scrape_id)
        VALUES ($1, $2, $3, $4::jsonb, $5, $6)
        RETURNING {INTELLIGENCE_COLUMNS}
        """,
        client_id,
        intelligence_type,
        content,
        json_arg(metadata),
        version,
        scrape_id,
    )
    if row is None:
        raise RuntimeError("Failed to insert intelligence.")
    return row
