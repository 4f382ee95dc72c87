"""
Delivery settings API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter(dependencies=[Depends(auth_dependencies.get_current_user)])


@router.get("/clients/{client_id}/delivery-settings")
async def get_delivery_settings(client_id: UUID) -> dict | None:
    """
    Returns JSON null, not 404, when nothing is configured.
    """
    return await service.get_settings(client_id)


@router.put("/clients/{client_id}/delivery-settings")
async def save_delivery_settings(
    client_id: UUID,
    request: schemas.DeliverySettingsRequest,
) -> dict:
    return await service.save_settings(client_id, request)
