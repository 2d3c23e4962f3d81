from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class VaccinationCreate(BaseModel):
    vaccine_name: str = Field(min_length=1, max_length=100)
    date_given: date
    next_due_date: date | None = None
    vet_name: str | None = Field(default=None, max_length=100)
    notes: str | None = Field(default=None, max_length=500)


class VaccinationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    pet_id: UUID
    vaccine_name: str
    date_given: date
    next_due_date: date | None
    vet_name: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
