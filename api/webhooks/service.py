"""
Webhook ingestion: presence checks, defaults, one insert each.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from core.errors import ApiError, database_errors
from emails import repository as email_repository
from emails import service as email_service
from intelligence import repository as intelligence_repository
from intelligence import service as intelligence_service
from scrapes import repository as scrape_repository
from scrapes import service as scrape_service

from . import schemas

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _or_default(value: Any, default: Any) -> Any:
    # JSON blob columns are NOT NULL; an explicit null means "use the default".
    return default if value is None else value


def _as_text(value: Any) -> str | None:
    """
    Text columns take strings as-is; structured values are stored as JSON.
    """
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=True, default=str)


async def ingest_scrape(payload: schemas.ScrapeWebhook) -> dict[str, Any]:
    if payload.client_id is None:
        raise ApiError(400, "client_id is required")

    with database_errors("Failed to save scrape", event="scrape_insert_failed"):
        row = await scrape_repository.insert_scrape(
            client_id=payload.client_id,
            scrape_date=payload.scrape_date or _utc_now(),
            urls_scraped=payload.urls_scraped,
            data_extracted=_or_default(payload.data_extracted, {}),
            status=payload.status,
        )

    logger.info("scrape_ingested id=%s client_id=%s urls=%s", row["id"], payload.client_id, len(payload.urls_scraped))
    return scrape_service.normalize(row)


async def ingest_intelligence(payload: schemas.IntelligenceWebhook) -> dict[str, Any]:
    intelligence_type = (payload.intelligence_type or "").strip()
    if payload.client_id is None or not intelligence_type:
        raise ApiError(400, "client_id and intelligence_type are required")

    with database_errors("Failed to save intelligence", event="intelligence_insert_failed"):
        row = await intelligence_repository.insert_intelligence(
            client_id=payload.client_id,
            intelligence_type=intelligence_type,
            content=_as_text(payload.content),
            metadata=_or_default(payload.metadata, {}),
            version=payload.version,
            scrape_id=payload.scrape_id,
        )

    logger.info(
        "intelligence_ingested id=%s client_id=%s type=%s",
        row["id"],
        payload.client_id,
        intelligence_type,
    )
    return intelligence_service.normalize(row)


async def ingest_email(payload: schemas.EmailWebhook) -> dict[str, Any]:
    if payload.client_id is None or not payload.recipient:
        raise ApiError(400, "client_id and recipient are required")

    with database_errors("Failed to save email", event="email_insert_failed"):
        row = await email_repository.insert_email(
            client_id=payload.client_id,
            recipient=_as_text(payload.recipient),
            subject=payload.subject,
            body=payload.body,
            email_type=payload.email_type,
            status=payload.status,
            metadata=_or_default(payload.metadata, {}),
            sent_at=payload.sent_at or _utc_now(),
        )

    logger.info("email_ingested id=%s client_id=%s status=%s", row["id"], payload.client_id, payload.status)
    return email_service.normalize(row)
