from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.vaccine_schedule import transition
from src.domain.models.vaccine_schedule import PetVaccineSchedule
from src.domain.value_objects.schedule_status import ScheduleStatus


@dataclass(slots=True)
class SkipInput:
    reason: str | None = None


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    schedule_id: UUID,
    payload: SkipInput,
    *,
    today: date | None = None,
) -> PetVaccineSchedule:
    # the reason is stored as the entry's notes
    return await transition.apply(
        uow,
        owner_id,
        schedule_id,
        target=ScheduleStatus.SKIPPED,
        completed_date=None,
        notes=payload.reason,
        today=today,
    )
