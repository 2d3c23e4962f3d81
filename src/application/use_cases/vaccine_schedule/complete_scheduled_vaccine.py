from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.vaccine_schedule import transition
from src.domain.models.vaccine_schedule import PetVaccineSchedule
from src.domain.value_objects.schedule_status import ScheduleStatus


@dataclass(slots=True)
class CompleteInput:
    completed_date: date
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    schedule_id: UUID,
    payload: CompleteInput,
    *,
    today: date | None = None,
) -> PetVaccineSchedule:
    return await transition.apply(
        uow,
        owner_id,
        schedule_id,
        target=ScheduleStatus.COMPLETED,
        completed_date=payload.completed_date,
        notes=payload.notes,
        today=today,
    )
