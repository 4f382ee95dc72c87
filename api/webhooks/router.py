"""
Webhook endpoints for the automation engine (n8n).

These stay open when admin auth is enabled; the engine has no user token.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter(prefix="/webhooks")


@router.post("/scrapes", status_code=status.HTTP_201_CREATED)
async def ingest_scrape(request: schemas.ScrapeWebhook) -> dict:
    return await service.ingest_scrape(request)


@router.post("/intelligence", status_code=status.HTTP_201_CREATED)
async def ingest_intelligence(request: schemas.IntelligenceWebhook) -> dict:
    return await service.ingest_intelligence(request)


@router.post("/emails", status_code=status.HTTP_201_CREATED)
async def ingest_email(request: schemas.EmailWebhook) -> dict:
    return await service.ingest_email(request)
