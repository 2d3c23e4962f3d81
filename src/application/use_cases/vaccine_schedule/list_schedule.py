from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.vaccine_schedule import PetVaccineSchedule


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    pet_id: UUID,
    *,
    today: date | None = None,
) -> list[PetVaccineSchedule]:
    """Schedule ordered by due date, with past-due pending entries reading as overdue."""
    today = today or date.today()
    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")
    entries = await uow.vaccine_schedules.list_by_pet(pet.id)
    return [entry.as_of(today) for entry in entries]
