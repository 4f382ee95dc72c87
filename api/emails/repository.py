"""
Email log persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from core import db
from core.jsonfields import json_arg

EMAIL_COLUMNS = """
    id, client_id, recipient, subject, body, email_type,
    status, metadata, sent_at, created_at
"""


async def list_for_client(client_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {EMAIL_COLUMNS}
        FROM emails
        WHERE client_id = $1
        ORDER BY sent_at DESC, created_at DESC
        """,
        client_id,
    )


async def insert_email(
    *,
    client_id: UUID,
    recipient: str,
    subject: str | None,
    body: str | None,
    email_type: str,
    status: str,
    metadata: Any,
    sent_at: datetime,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO emails
          (client_id, recipient, subject, body, email_type, status, metadata, sent_at)
        VALUES ($1, $2, $3, $4, $5, $6, $7::jsonb, $8)
        RETURNING {EMAIL_COLUMNS}
        """,
        client_id,
        recipient,
        subject,
        body,
        email_type,
        status,
        json_arg(metadata),
        sent_at,
    )
    if row is None:
        raise RuntimeError("Failed to insert email.")
    return row
