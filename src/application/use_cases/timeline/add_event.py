from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.timeline_event import HealthTimelineEvent
from src.domain.value_objects.timeline_event_type import TimelineEventType

TITLE_MAX_LENGTH = 200


@dataclass(slots=True)
class AddEventInput:
    event_type: TimelineEventType
    event_date: date
    title: str
    description: str | None = None
    severity: str | None = None
    metadata: dict[str, Any] | None = None


def normalize_title(title: str) -> str:
    value = (title or "").strip()
    if not value:
        raise ValidationError("Title is required")
    if len(value) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
    return value


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    pet_id: UUID,
    payload: AddEventInput,
) -> HealthTimelineEvent:
    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")
    event = HealthTimelineEvent.create(
        pet_id=pet.id,
        owner_id=owner_id,
        event_type=TimelineEventType(payload.event_type).value,
        event_date=payload.event_date,
        title=normalize_title(payload.title),
        description=payload.description,
        severity=payload.severity,
        metadata=payload.metadata,
    )
    created = await uow.timeline.add(event)
    await uow.commit()
    return created
