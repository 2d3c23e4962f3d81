from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.pet import Pet


async def execute(uow: UnitOfWork, owner_id: UUID) -> list[Pet]:
    return await uow.pets.list_for_owner(owner_id)
