"""
Client persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db

CLIENT_COLUMNS = """
    id, name, website, status, n8n_webhook_url,
    competitor_instagram_urls, competitor_tiktok_urls,
    created_at, updated_at
"""


async def list_clients() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {CLIENT_COLUMNS}
        FROM clients
        ORDER BY created_at DESC
        """
    )


async def get_client(client_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {CLIENT_COLUMNS}
        FROM clients
        WHERE id = $1
        """,
        client_id,
    )


async def create_client(
    *,
    name: str,
    website: str,
    status: str,
    n8n_webhook_url: str | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO clients (name, website, status, n8n_webhook_url)
        VALUES ($1, $2, $3, $4)
        RETURNING {CLIENT_COLUMNS}
        """,
        name,
        website,
        status,
        n8n_webhook_url,
    )
    if row is None:
        raise RuntimeError("Failed to create client.")
    return row


async def update_client(
    client_id: UUID,
    *,
    status: str | None,
    n8n_webhook_url: str | None,
) -> dict[str, Any] | None:
    """
    Status is only changed when given; the webhook URL is always written.
    """
    return await db.fetch_one(
        f"""
        UPDATE clients
        SET status = COALESCE($2, status),
            n8n_webhook_url = $3,
            updated_at = now()
        WHERE id = $1
        RETURNING {CLIENT_COLUMNS}
        """,
        client_id,
        status,
        n8n_webhook_url,
    )


async def update_competitor_urls(
    client_id: UUID,
    *,
    instagram_urls: list[str],
    tiktok_urls: list[str],
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE clients
        SET competitor_instagram_urls = $2::text[],
            competitor_tiktok_urls = $3::text[],
            updated_at = now()
        WHERE id = $1
        RETURNING {CLIENT_COLUMNS}
        """,
        client_id,
        instagram_urls,
        tiktok_urls,
    )


async def delete_client(client_id: UUID) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM clients
        WHERE id = $1
        RETURNING id
        """,
        client_id,
    )
    return row is not None
