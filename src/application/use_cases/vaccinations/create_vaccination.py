from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.timeline_event import HealthTimelineEvent
from src.domain.models.vaccination import Vaccination
from src.domain.value_objects.timeline_event_type import TimelineEventType

VACCINE_NAME_MAX_LENGTH = 100


@dataclass(slots=True)
class CreateVaccinationInput:
    vaccine_name: str
    date_given: date
    next_due_date: date | None = None
    vet_name: str | None = None
    notes: str | None = None


def vaccination_timeline_event(vaccination: Vaccination) -> HealthTimelineEvent:
    return HealthTimelineEvent.create(
        pet_id=vaccination.pet_id,
        owner_id=vaccination.owner_id,
        event_type=TimelineEventType.VACCINATION.value,
        event_date=vaccination.date_given,
        title=f"{vaccination.vaccine_name} Vaccination",
        description=vaccination.notes,
        metadata={"vet_name": vaccination.vet_name},
    )


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    pet_id: UUID,
    payload: CreateVaccinationInput,
    *,
    today: date | None = None,
) -> Vaccination:
    today = today or date.today()
    name = (payload.vaccine_name or "").strip()
    if not name:
        raise ValidationError("Vaccine name is required")
    if len(name) > VACCINE_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Vaccine name must be at most {VACCINE_NAME_MAX_LENGTH} characters"
        )
    if payload.date_given > today:
        raise ValidationError("Date given cannot be in the future")

    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")

    vaccination = Vaccination.create(
        pet_id=pet.id,
        owner_id=owner_id,
        vaccine_name=name,
        date_given=payload.date_given,
        next_due_date=payload.next_due_date,
        vet_name=(payload.vet_name or "").strip() or None,
        notes=(payload.notes or "").strip() or None,
    )
    created = await uow.vaccinations.add(vaccination)
    await uow.timeline.add(vaccination_timeline_event(created))
    await uow.commit()
    return created
