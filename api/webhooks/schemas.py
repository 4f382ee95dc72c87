"""
Webhook payloads sent by the automation engine.

Only the identifying fields are checked; everything else has a default.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class ScrapeWebhook(BaseModel):
    client_id: UUID | None = None
    scrape_date: datetime | None = None
    urls_scraped: list[Any] = Field(default_factory=list)
    data_extracted: Any = Field(default_factory=dict)
    status: str = "completed"


class IntelligenceWebhook(BaseModel):
    client_id: UUID | None = None
    intelligence_type: str | None = None
    content: Any = None
    metadata: Any = Field(default_factory=dict)
    version: int = 1
    scrape_id: UUID | None = None


class EmailWebhook(BaseModel):
    client_id: UUID | None = None
    recipient: str | list[str] | None = None
    subject: str | None = None
    body: str | None = None
    email_type: str = "newsletter"
    status: str = "sent"
    metadata: Any = Field(default_factory=dict)
    sent_at: datetime | None = None
