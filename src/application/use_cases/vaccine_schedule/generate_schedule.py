from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.application.errors import InfrastructureError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.vaccine_schedule import PetVaccineSchedule
from src.domain.services.vaccine_schedule import plan_schedule

logger = logging.getLogger(__name__)

NO_PROTOCOLS_ERROR = "No vaccine protocols found for this species"
GENERATION_FAILED_ERROR = "Failed to generate vaccine schedule"


@dataclass(slots=True)
class GenerateScheduleInput:
    pet_id: UUID
    species: str
    date_of_birth: date
    # Opt-in guard: leave an existing schedule untouched instead of appending to it
    skip_if_existing: bool = False


@dataclass(slots=True)
class GenerateScheduleResult:
    success: bool
    error: str | None = None
    created: list[PetVaccineSchedule] = field(default_factory=list)


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    payload: GenerateScheduleInput,
    *,
    today: date | None = None,
) -> GenerateScheduleResult:
    """Project a pet's vaccine schedule from the species protocol table.

    Failures are reported through the result rather than raised, datastore
    errors included. Without ``skip_if_existing`` a second call appends a
    second set of pending rows.
    """
    today = today or date.today()
    try:
        return await _generate(uow, owner_id, payload, today)
    except InfrastructureError as exc:
        await uow.rollback()
        logger.error("Schedule generation failed for pet %s: %s", payload.pet_id, exc.message)
        return GenerateScheduleResult(success=False, error=exc.message)
    except Exception:
        await uow.rollback()
        logger.exception("Schedule generation failed for pet %s", payload.pet_id)
        return GenerateScheduleResult(success=False, error=GENERATION_FAILED_ERROR)


async def _generate(
    uow: UnitOfWork, owner_id: UUID, payload: GenerateScheduleInput, today: date
) -> GenerateScheduleResult:
    if payload.skip_if_existing:
        existing = await uow.vaccine_schedules.count_by_pet(payload.pet_id)
        if existing:
            logger.info(
                "Schedule generation skipped: pet=%s already has %s entries",
                payload.pet_id,
                existing,
            )
            return GenerateScheduleResult(success=True)

    protocols = await uow.vaccine_protocols.list_for_species(payload.species.lower())
    if not protocols:
        return GenerateScheduleResult(success=False, error=NO_PROTOCOLS_ERROR)

    planned = plan_schedule(protocols, date_of_birth=payload.date_of_birth, today=today)
    if not planned:
        return GenerateScheduleResult(success=True)

    entries = [
        PetVaccineSchedule.create(
            pet_id=payload.pet_id,
            owner_id=owner_id,
            protocol_id=dose.protocol_id,
            vaccine_name=dose.vaccine_name,
            due_date=dose.due_date,
        )
        for dose in planned
    ]
    created = await uow.vaccine_schedules.add_many(entries)
    await uow.commit()
    logger.info("Generated %s schedule entries for pet %s", len(created), payload.pet_id)
    return GenerateScheduleResult(success=True, created=created)
