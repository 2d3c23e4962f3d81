from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, owner_id: UUID, pet_id: UUID) -> None:
    """Delete a pet together with its vaccinations, schedule and timeline.

    Everything happens in the unit of work's single transaction; a failure
    part-way leaves no rows removed.
    """
    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")

    vaccinations = await uow.vaccinations.delete_for_pet(owner_id, pet_id)
    schedule_entries = await uow.vaccine_schedules.delete_for_pet(owner_id, pet_id)
    events = await uow.timeline.delete_for_pet(owner_id, pet_id)
    deleted = await uow.pets.delete(owner_id, pet_id)
    if not deleted:
        raise NotFound("Pet not found")
    await uow.commit()
    logger.info(
        "Pet deleted: id=%s vaccinations=%s schedule_entries=%s timeline_events=%s",
        pet_id,
        vaccinations,
        schedule_entries,
        events,
    )
