from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.pets.validation import (
    blank_to_none,
    ensure_birth_date,
    ensure_weight,
    normalize_name,
    parse_species,
)
from src.domain.models.pet import Pet

# Free-text fields where an empty string clears the stored value
_OPTIONAL_TEXT_FIELDS = (
    "breed",
    "blood_group",
    "known_allergies",
    "chronic_conditions",
    "photo_url",
    "emergency_contact_name",
    "emergency_contact_phone",
    "vet_name",
    "vet_phone",
    "vet_email",
)


@dataclass(slots=True)
class UpdatePetInput:
    name: str | None = None
    species: str | None = None
    date_of_birth: date | None = None
    breed: str | None = None
    weight_kg: Decimal | None = None
    is_indoor: bool | None = None
    blood_group: str | None = None
    known_allergies: str | None = None
    chronic_conditions: str | None = None
    photo_url: str | None = None
    emergency_contact_name: str | None = None
    emergency_contact_phone: str | None = None
    vet_name: str | None = None
    vet_phone: str | None = None
    vet_email: str | None = None


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    pet_id: UUID,
    payload: UpdatePetInput,
    *,
    today: date | None = None,
) -> Pet:
    today = today or date.today()
    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")

    if payload.name is not None:
        pet.name = normalize_name(payload.name)
    if payload.species is not None:
        pet.species = parse_species(payload.species).value
    if payload.date_of_birth is not None:
        ensure_birth_date(payload.date_of_birth, today)
        pet.date_of_birth = payload.date_of_birth
    if payload.weight_kg is not None:
        ensure_weight(payload.weight_kg)
        pet.weight_kg = payload.weight_kg
    if payload.is_indoor is not None:
        pet.is_indoor = payload.is_indoor
    for field_name in _OPTIONAL_TEXT_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            setattr(pet, field_name, blank_to_none(value))

    pet.touch()
    updated = await uow.pets.update(pet)
    await uow.commit()
    return updated
