from __future__ import annotations

from dataclasses import dataclass, field

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.pet import Pet
from src.domain.models.timeline_event import HealthTimelineEvent
from src.domain.models.vaccination import Vaccination

EMERGENCY_TIMELINE_LIMIT = 10


@dataclass(slots=True)
class EmergencyProfile:
    pet: Pet
    last_vaccination: Vaccination | None = None
    timeline: list[HealthTimelineEvent] = field(default_factory=list)


async def execute(uow: UnitOfWork, unique_pet_id: str) -> EmergencyProfile:
    """Public lookup by the QR identifier; no owner scoping."""
    pet = await uow.pets.get_by_unique_pet_id(unique_pet_id.strip().upper())
    if not pet:
        raise NotFound("Pet not found")
    last_vaccination = await uow.vaccinations.latest_for_pet(pet.id)
    timeline = await uow.timeline.list_by_pet(pet.id, limit=EMERGENCY_TIMELINE_LIMIT)
    return EmergencyProfile(pet=pet, last_vaccination=last_vaccination, timeline=timeline)
