"""
Delivery settings business logic.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from core.errors import ApiError, database_errors

from . import repository, schemas

logger = logging.getLogger(__name__)

MAX_RECIPIENTS = 5
FREQUENCIES = ("weekly", "biweekly", "monthly")
DEFAULT_FREQUENCY = "weekly"


def clean_recipients(recipients: list[str | None]) -> list[str]:
    return [r.strip() for r in recipients if r and r.strip()]


async def get_settings(client_id: UUID) -> dict[str, Any] | None:
    """
    The stored row, or None when the client has none yet.
    """
    with database_errors("Failed to fetch delivery settings", event="delivery_settings_fetch_failed"):
        return await repository.get_settings(client_id)


async def save_settings(client_id: UUID, payload: schemas.DeliverySettingsRequest) -> dict[str, Any]:
    recipients = clean_recipients(payload.recipients)
    if not recipients:
        raise ApiError(400, "At least one recipient email is required")
    if len(recipients) > MAX_RECIPIENTS:
        raise ApiError(400, f"Maximum {MAX_RECIPIENTS} recipients allowed")

    frequency = (payload.frequency or "").strip() or DEFAULT_FREQUENCY
    if frequency not in FREQUENCIES:
        raise ApiError(400, f"Frequency must be one of: {', '.join(FREQUENCIES)}")

    with database_errors("Failed to save delivery settings", event="delivery_settings_save_failed"):
        row = await repository.upsert_settings(
            client_id,
            recipients=recipients,
            frequency=frequency,
            is_active=payload.is_active,
        )

    logger.info(
        "delivery_settings_saved client_id=%s recipients=%s frequency=%s",
        client_id,
        len(recipients),
        frequency,
    )
    return row
