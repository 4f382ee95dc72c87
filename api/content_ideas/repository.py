"""
Content idea persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db


async def list_with_relations(client_id: UUID) -> list[dict[str, Any]]:
    """
    Ideas with their referenced scrape and intelligence rows as JSON objects.

    Requires `content_ideas.scrape_id` and `content_ideas.intelligence_id`;
    databases without those columns raise UndefinedColumnError.
    """
    return await db.fetch_all(
        """
        SELECT
          ci.*,
          to_jsonb(s) AS scrape,
          to_jsonb(i) AS intelligence
        FROM content_ideas ci
        LEFT JOIN scrapes s ON s.id = ci.scrape_id
        LEFT JOIN client_intelligence i ON i.id = ci.intelligence_id
        WHERE ci.client_id = $1
        ORDER BY ci.created_at DESC
        """,
        client_id,
    )


async def list_for_client(client_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM content_ideas
        WHERE client_id = $1
        ORDER BY created_at DESC
        """,
        client_id,
    )
