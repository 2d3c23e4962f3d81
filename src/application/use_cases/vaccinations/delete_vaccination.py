from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, owner_id: UUID, vaccination_id: UUID) -> None:
    deleted = await uow.vaccinations.delete(owner_id, vaccination_id)
    if not deleted:
        raise NotFound("Vaccination not found")
    await uow.commit()
