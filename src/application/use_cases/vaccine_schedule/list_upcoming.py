from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.pet import Pet
from src.domain.models.vaccine_schedule import PetVaccineSchedule
from src.utils.dates import add_weeks

DEFAULT_WINDOW_DAYS = 30


@dataclass(slots=True)
class UpcomingVaccination:
    entry: PetVaccineSchedule
    pet: Pet


def window_end(today: date, days: int) -> date:
    """Reminder window end; the day count is rounded up to whole weeks."""
    return add_weeks(today, math.ceil(days / 7))


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    *,
    days: int = DEFAULT_WINDOW_DAYS,
    today: date | None = None,
) -> list[UpcomingVaccination]:
    """Open schedule entries across all of the owner's pets due within the window.

    Entries already past due are included and read as overdue.
    """
    if days < 1:
        raise ValidationError("days must be a positive number")
    today = today or date.today()
    entries = await uow.vaccine_schedules.list_open_due_before(owner_id, window_end(today, days))
    pets = {pet.id: pet for pet in await uow.pets.list_for_owner(owner_id)}
    return [
        UpcomingVaccination(entry=entry.as_of(today), pet=pets[entry.pet_id])
        for entry in entries
        if entry.pet_id in pets
    ]
