from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.timeline_event import HealthTimelineEvent


async def execute(uow: UnitOfWork, owner_id: UUID, pet_id: UUID) -> list[HealthTimelineEvent]:
    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")
    return await uow.timeline.list_by_pet(pet.id)
