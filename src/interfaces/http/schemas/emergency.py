from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class EmergencyPet(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    unique_pet_id: str
    name: str
    species: str
    breed: str | None
    date_of_birth: date
    blood_group: str | None
    known_allergies: str | None
    chronic_conditions: str | None
    photo_url: str | None
    vet_name: str | None
    vet_phone: str | None
    emergency_contact_name: str | None
    emergency_contact_phone: str | None


class EmergencyVaccination(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    vaccine_name: str
    date_given: date


class EmergencyTimelineEvent(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    event_type: str
    event_date: date
    title: str
    severity: str | None


class EmergencyProfileResponse(BaseModel):
    pet: EmergencyPet
    last_vaccination: EmergencyVaccination | None
    timeline: list[EmergencyTimelineEvent]
