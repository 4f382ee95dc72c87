"""
Pydantic request bodies for client endpoints.

Fields are optional on purpose: presence checks happen in the service so the
caller gets the portal's own error messages.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateClientRequest(BaseModel):
    name: str | None = Field(default=None, max_length=300)
    website: str | None = Field(default=None, max_length=2000)
    status: str = "active"
    n8n_webhook_url: str | None = Field(default=None, max_length=2000)


class UpdateClientRequest(BaseModel):
    status: str | None = None
    n8n_webhook_url: str | None = Field(default=None, max_length=2000)


class CompetitorUrlsRequest(BaseModel):
    competitor_instagram_urls: list[str] = Field(default_factory=list)
    competitor_tiktok_urls: list[str] = Field(default_factory=list)
