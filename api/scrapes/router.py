"""
Scrape API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from intelligence import service as intelligence_service

from . import service

router = APIRouter(dependencies=[Depends(auth_dependencies.get_current_user)])


@router.get("/clients/{client_id}/scrapes")
async def list_client_scrapes(client_id: UUID) -> list[dict]:
    """
    Newest first, each with `intelligence_count` when it could be computed.
    """
    return await service.list_for_client(client_id)


@router.get("/scrapes/{scrape_id}")
async def get_scrape(scrape_id: str) -> dict:
    return await service.get_scrape(scrape_id)


@router.get("/scrapes/{scrape_id}/intelligence")
async def get_scrape_intelligence(scrape_id: UUID) -> list[dict]:
    return await intelligence_service.list_for_scrape(scrape_id)
