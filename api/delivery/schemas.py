"""
Pydantic schemas for delivery settings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DeliverySettingsRequest(BaseModel):
    recipients: list[str | None] = Field(default_factory=list)
    frequency: str | None = "weekly"
    is_active: bool = True
