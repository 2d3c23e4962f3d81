from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.timeline_event_type import TimelineEventType


class TimelineEventCreate(BaseModel):
    event_type: TimelineEventType
    event_date: date
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    severity: str | None = Field(default=None, max_length=30)
    metadata: dict[str, Any] | None = None


class TimelineEventUpdate(BaseModel):
    event_date: date | None = None
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    severity: str | None = Field(default=None, max_length=30)


class TimelineEventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    pet_id: UUID
    event_type: TimelineEventType
    event_date: date
    title: str
    description: str | None
    severity: str | None
    metadata: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime
