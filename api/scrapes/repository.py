"""
Scrape persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from core import db
from core.jsonfields import json_arg

SCRAPE_COLUMNS = "id, client_id, scrape_date, urls_scraped, data_extracted, status, created_at"


async def list_for_client(client_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {SCRAPE_COLUMNS}
        FROM scrapes
        WHERE client_id = $1
        ORDER BY scrape_date DESC
        """,
        client_id,
    )


async def get_scrape(scrape_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {SCRAPE_COLUMNS}
        FROM scrapes
        WHERE id = $1
        """,
        scrape_id,
    )


async def intelligence_scrape_ids(scrape_ids: list[UUID]) -> list[dict[str, Any]]:
    """
    One row per intelligence record attached to any of `scrape_ids`.
    """
    return await db.fetch_all(
        """
        SELECT id, scrape_id
        FROM client_intelligence
        WHERE scrape_id = ANY($1::uuid[])
        """,
        scrape_ids,
    )


async def insert_scrape(
    *,
    client_id: UUID,
    scrape_date: datetime,
    urls_scraped: list[Any],
    data_extracted: Any,
    status: str,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO scrapes (client_id, scrape_date, urls_scraped, data_extracted, status)
        VALUES ($1, $2, $3::jsonb, $4::jsonb, $5)
        RETURNING {SCRAPE_COLUMNS}
        """,
        client_id,
        scrape_date,
        json_arg(urls_scraped),
        json_arg(data_extracted),
        status,
    )
    if row is None:
        raise RuntimeError("Failed to insert scrape.")
    return row
