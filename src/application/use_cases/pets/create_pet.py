from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.pets.validation import (
    blank_to_none,
    ensure_birth_date,
    ensure_weight,
    normalize_name,
    parse_species,
)
from src.domain.models.pet import Pet

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreatePetInput:
    name: str
    species: str
    date_of_birth: date
    breed: str | None = None
    weight_kg: Decimal | None = None
    is_indoor: bool = True
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
    payload: CreatePetInput,
    *,
    today: date | None = None,
) -> Pet:
    today = today or date.today()
    name = normalize_name(payload.name)
    species = parse_species(payload.species)
    ensure_birth_date(payload.date_of_birth, today)
    ensure_weight(payload.weight_kg)

    pet = Pet.create(
        owner_id=owner_id,
        name=name,
        species=species.value,
        date_of_birth=payload.date_of_birth,
        breed=blank_to_none(payload.breed),
        weight_kg=payload.weight_kg,
        is_indoor=payload.is_indoor,
        blood_group=blank_to_none(payload.blood_group),
        known_allergies=blank_to_none(payload.known_allergies),
        chronic_conditions=blank_to_none(payload.chronic_conditions),
        photo_url=blank_to_none(payload.photo_url),
        emergency_contact_name=blank_to_none(payload.emergency_contact_name),
        emergency_contact_phone=blank_to_none(payload.emergency_contact_phone),
        vet_name=blank_to_none(payload.vet_name),
        vet_phone=blank_to_none(payload.vet_phone),
        vet_email=blank_to_none(payload.vet_email),
    )
    created = await uow.pets.add(pet)
    await uow.commit()
    logger.info("Pet created: id=%s unique_pet_id=%s", created.id, created.unique_pet_id)
    return created
