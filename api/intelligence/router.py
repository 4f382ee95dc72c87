"""
Intelligence API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies

from . import service

router = APIRouter(dependencies=[Depends(auth_dependencies.get_current_user)])


@router.get("/clients/{client_id}/intelligence")
async def list_client_intelligence(client_id: UUID) -> list[dict]:
    return await service.list_for_client(client_id)


@router.get("/clients/{client_id}/intelligence/{intelligence_type}")
async def list_client_intelligence_by_type(client_id: UUID, intelligence_type: str) -> list[dict]:
    return await service.list_for_client(client_id, intelligence_type=intelligence_type)
