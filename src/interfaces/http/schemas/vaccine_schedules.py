from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.schedule_status import ScheduleStatus


class ScheduleEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    pet_id: UUID
    protocol_id: UUID | None
    vaccine_name: str
    due_date: date
    status: ScheduleStatus
    completed_date: date | None
    notes: str | None
    created_at: datetime
    updated_at: datetime


class GenerateScheduleRequest(BaseModel):
    skip_if_existing: bool = Field(
        default=False,
        description="Leave the schedule untouched when the pet already has entries",
    )


class GenerateScheduleResponse(BaseModel):
    success: bool
    error: str | None = None
    created: list[ScheduleEntryResponse] = Field(default_factory=list)


class CompleteScheduleRequest(BaseModel):
    completed_date: date | None = Field(default=None, description="Defaults to today")
    notes: str | None = Field(default=None, max_length=500)


class SkipScheduleRequest(BaseModel):
    reason: str | None = Field(default=None, max_length=500)


class UpcomingVaccinationResponse(ScheduleEntryResponse):
    pet_name: str
    species: str
