from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, owner_id: UUID, event_id: UUID) -> None:
    deleted = await uow.timeline.delete(owner_id, event_id)
    if not deleted:
        raise NotFound("Timeline event not found")
    await uow.commit()
