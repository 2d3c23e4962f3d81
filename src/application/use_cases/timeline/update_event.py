from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.timeline.add_event import normalize_title
from src.domain.models.timeline_event import HealthTimelineEvent


@dataclass(slots=True)
class UpdateEventInput:
    event_date: date | None = None
    title: str | None = None
    description: str | None = None
    severity: str | None = None


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    event_id: UUID,
    payload: UpdateEventInput,
) -> HealthTimelineEvent:
    # event_type, metadata and the owning pet are fixed once recorded
    event = await uow.timeline.get(owner_id, event_id)
    if not event:
        raise NotFound("Timeline event not found")
    if payload.event_date is not None:
        event.event_date = payload.event_date
    if payload.title is not None:
        event.title = normalize_title(payload.title)
    if payload.description is not None:
        event.description = payload.description or None
    if payload.severity is not None:
        event.severity = payload.severity or None
    event.touch()
    updated = await uow.timeline.update(event)
    await uow.commit()
    return updated
