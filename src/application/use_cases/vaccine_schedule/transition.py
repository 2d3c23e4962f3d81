from __future__ import annotations

from datetime import date
from uuid import UUID

from src.application.errors import InvalidTransition, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.vaccine_schedule import PetVaccineSchedule
from src.domain.value_objects.schedule_status import ScheduleStatus, can_transition


async def apply(
    uow: UnitOfWork,
    owner_id: UUID,
    schedule_id: UUID,
    *,
    target: ScheduleStatus,
    completed_date: date | None,
    notes: str | None,
    today: date | None = None,
) -> PetVaccineSchedule:
    """Move one schedule entry to ``target`` and persist it."""
    today = today or date.today()
    entry = await uow.vaccine_schedules.get(owner_id, schedule_id)
    if not entry:
        raise NotFound("Schedule entry not found")

    current = ScheduleStatus(entry.status)
    if not can_transition(current, target):
        raise InvalidTransition(
            f"Cannot mark a {current.value} entry as {target.value}",
            details={"current": current.value, "target": target.value},
        )

    entry.status = target.value
    entry.completed_date = completed_date
    entry.notes = notes or None
    entry.touch()
    updated = await uow.vaccine_schedules.update(entry)
    await uow.commit()
    return updated.as_of(today)
