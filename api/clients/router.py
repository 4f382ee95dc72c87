"""
Client API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter(dependencies=[Depends(auth_dependencies.get_current_user)])


@router.get("/clients")
async def list_clients() -> list[dict]:
    return await service.list_clients()


@router.post("/clients", status_code=status.HTTP_201_CREATED)
async def create_client(request: schemas.CreateClientRequest) -> dict:
    return await service.create_client(request)


@router.get("/clients/{client_id}")
async def get_client(client_id: str) -> dict:
    return await service.get_client(client_id)


@router.put("/clients/{client_id}")
async def update_client(client_id: UUID, request: schemas.UpdateClientRequest) -> dict:
    return await service.update_client(client_id, request)


@router.put("/clients/{client_id}/competitor-urls")
async def update_competitor_urls(client_id: UUID, request: schemas.CompetitorUrlsRequest) -> dict:
    return await service.update_competitor_urls(client_id, request)


@router.delete("/clients/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(client_id: UUID) -> Response:
    await service.delete_client(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/clients/{client_id}/trigger-automation")
async def trigger_automation(client_id: str) -> dict:
    """
    Fire the client's n8n webhook. Only active clients with a URL qualify.
    """
    return await service.trigger_automation(client_id)
