from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.pet import Pet


async def execute(uow: UnitOfWork, owner_id: UUID, pet_id: UUID) -> Pet:
    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")
    return pet
