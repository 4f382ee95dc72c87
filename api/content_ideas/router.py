"""
Content idea API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies

from . import service

router = APIRouter(dependencies=[Depends(auth_dependencies.get_current_user)])


@router.get("/clients/{client_id}/content-ideas")
async def list_client_content_ideas(client_id: UUID) -> list[dict]:
    return await service.list_for_client(client_id)
