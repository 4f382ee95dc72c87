"""
Client business logic.

Scope:
- CRUD over the `clients` table with the portal's validation rules
- competitor URL lists (Instagram/TikTok, at most 5 each)
- triggering the client's automation webhook
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

import asyncpg

from core import db, settings, webhook
from core.errors import ApiError, database_errors, parse_id

from . import repository, schemas, validation

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _check_status(status: str) -> None:
    if status not in validation.CLIENT_STATUSES:
        raise ApiError(400, f"Status must be one of: {', '.join(validation.CLIENT_STATUSES)}")


def _check_webhook_url(url: str | None) -> None:
    if url and not validation.is_valid_url(url):
        raise ApiError(400, "Please enter a valid webhook URL")


async def list_clients() -> list[dict[str, Any]]:
    with database_errors("Failed to fetch clients", event="clients_fetch_failed"):
        return await repository.list_clients()


async def get_client(client_id: UUID | str) -> dict[str, Any]:
    client_uuid = parse_id(client_id, "Client not found")
    with database_errors("Client not found", status_code=404, event="client_fetch_failed"):
        row = await repository.get_client(client_uuid)
    if row is None:
        raise ApiError(404, "Client not found")
    return row


async def create_client(payload: schemas.CreateClientRequest) -> dict[str, Any]:
    name = (payload.name or "").strip()
    website = (payload.website or "").strip()
    if not name or not website:
        raise ApiError(400, "Name and website are required")

    status = (payload.status or "active").strip()
    _check_status(status)

    webhook_url = (payload.n8n_webhook_url or "").strip() or None
    _check_webhook_url(webhook_url)

    try:
        row = await repository.create_client(
            name=name,
            website=website,
            status=status,
            n8n_webhook_url=webhook_url,
        )
    except asyncpg.UniqueViolationError as exc:
        logger.error("client_create_failed website=%s error=%s", website, exc)
        raise ApiError(409, "Client already exists", str(exc)) from exc
    except db.DB_ERRORS as exc:
        logger.error("client_create_failed website=%s error=%s", website, exc)
        raise ApiError(500, "Failed to create client", str(exc)) from exc

    logger.info("client_created id=%s website=%s", row["id"], website)
    return row


async def update_client(client_id: UUID, payload: schemas.UpdateClientRequest) -> dict[str, Any]:
    status = (payload.status or "").strip() or None
    if status is not None:
        _check_status(status)

    webhook_url = (payload.n8n_webhook_url or "").strip() or None
    _check_webhook_url(webhook_url)

    with database_errors("Failed to update client", status_code=400, event="client_update_failed"):
        row = await repository.update_client(client_id, status=status, n8n_webhook_url=webhook_url)
    if row is None:
        raise ApiError(404, "Client not found")
    return row


async def update_competitor_urls(
    client_id: UUID,
    payload: schemas.CompetitorUrlsRequest,
) -> dict[str, Any]:
    instagram = validation.clean_list(payload.competitor_instagram_urls)
    tiktok = validation.clean_list(payload.competitor_tiktok_urls)

    for urls, platform in ((instagram, "instagram"), (tiktok, "tiktok")):
        message = validation.competitor_urls_error(urls, platform)
        if message:
            raise ApiError(400, message)

    with database_errors(
        "Failed to save competitor URLs",
        status_code=400,
        event="competitor_urls_update_failed",
    ):
        row = await repository.update_competitor_urls(
            client_id,
            instagram_urls=instagram,
            tiktok_urls=tiktok,
        )
    if row is None:
        raise ApiError(404, "Client not found")
    return row


async def delete_client(client_id: UUID) -> None:
    with database_errors("Failed to delete client", status_code=400, event="client_delete_failed"):
        deleted = await repository.delete_client(client_id)
    if not deleted:
        raise ApiError(404, "Client not found")
    logger.info("client_deleted id=%s", client_id)


def automation_payload(client: dict[str, Any], *, triggered_at: datetime | None = None) -> dict[str, Any]:
    return {
        "client_id": str(client["id"]),
        "name": client["name"],
        "website": client["website"],
        "triggered_at": (triggered_at or _utc_now()).isoformat(),
    }


async def trigger_automation(client_id: UUID | str) -> dict[str, str]:
    client = await get_client(client_id)

    if client.get("status") != "active":
        raise ApiError(400, "Client must be active to trigger automation")

    webhook_url = client.get("n8n_webhook_url")
    if not webhook_url:
        raise ApiError(400, "Client does not have a webhook URL configured")

    try:
        await webhook.post_json(
            webhook_url,
            automation_payload(client),
            timeout_s=settings.automation_webhook_timeout_s(),
        )
    except webhook.WebhookError as exc:
        logger.error("automation_trigger_failed client_id=%s error=%s", client_id, exc)
        raise ApiError(502, "Failed to trigger automation", str(exc)) from exc

    logger.info("automation_triggered client_id=%s", client_id)
    return {"status": "triggered"}
