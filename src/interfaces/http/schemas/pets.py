from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class _PetFields(BaseModel):
    breed: str | None = Field(default=None, max_length=100)
    weight_kg: Decimal | None = Field(default=None, gt=0, le=200)
    blood_group: str | None = Field(default=None, max_length=20)
    known_allergies: str | None = Field(default=None, max_length=500)
    chronic_conditions: str | None = Field(default=None, max_length=500)
    photo_url: str | None = None
    emergency_contact_name: str | None = Field(default=None, max_length=100)
    emergency_contact_phone: str | None = Field(default=None, max_length=20)
    vet_name: str | None = Field(default=None, max_length=100)
    vet_phone: str | None = Field(default=None, max_length=20)
    vet_email: EmailStr | None = None

    @field_validator("vet_email", mode="before")
    @classmethod
    def empty_email_is_none(cls, v):
        # the form sends "" when the field is left blank
        if isinstance(v, str) and not v.strip():
            return None
        return v


class PetCreate(_PetFields):
    name: str = Field(min_length=1, max_length=50)
    species: str = Field(description="Dog or Cat")
    date_of_birth: date
    is_indoor: bool = True


class PetUpdate(_PetFields):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    species: str | None = None
    date_of_birth: date | None = None
    is_indoor: bool | None = None


class PetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    unique_pet_id: str
    name: str
    species: str
    breed: str | None
    date_of_birth: date
    weight_kg: Decimal | None
    is_indoor: bool
    blood_group: str | None
    known_allergies: str | None
    chronic_conditions: str | None
    photo_url: str | None
    emergency_contact_name: str | None
    emergency_contact_phone: str | None
    vet_name: str | None
    vet_phone: str | None
    vet_email: str | None
    created_at: datetime
    updated_at: datetime


class EmergencyLinkResponse(BaseModel):
    unique_pet_id: str
    url: str
