"""
Delivery settings persistence (raw SQL).

One row per client, keyed on `client_id`.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db

DELIVERY_COLUMNS = "id, client_id, recipients, frequency, is_active, created_at, updated_at"


async def get_settings(client_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {DELIVERY_COLUMNS}
        FROM delivery_settings
        WHERE client_id = $1
        LIMIT 1
        """,
        client_id,
    )


async def upsert_settings(
    client_id: UUID,
    *,
    recipients: list[str],
    frequency: str,
    is_active: bool,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO delivery_settings (client_id, recipients, frequency, is_active, updated_at)
        VALUES ($1, $2::text[], $3, $4, now())
        ON CONFLICT (client_id) DO UPDATE
        SET recipients = EXCLUDED.recipients,
            frequency = EXCLUDED.frequency,
            is_active = EXCLUDED.is_active,
            updated_at = now()
        RETURNING {DELIVERY_COLUMNS}
        """,
        client_id,
        recipients,
        frequency,
        is_active,
    )
    if row is None:
        raise RuntimeError("Failed to upsert delivery settings.")
    return row
