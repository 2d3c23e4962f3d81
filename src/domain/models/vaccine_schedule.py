from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.schedule_status import ScheduleStatus


def effective_status(status: str, due_date: date, today: date) -> str:
    """Status as presented to callers.

    A stored ``pending`` entry whose due date has passed reads as ``overdue``.
    The stored value is never changed.
    """
    if status == ScheduleStatus.PENDING.value and due_date < today:
        return ScheduleStatus.OVERDUE.value
    return status


@dataclass(slots=True)
class PetVaccineSchedule:
    id: UUID
    pet_id: UUID
    owner_id: UUID
    vaccine_name: str
    due_date: date
    status: str = ScheduleStatus.PENDING.value
    protocol_id: UUID | None = None
    completed_date: date | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        pet_id: UUID,
        owner_id: UUID,
        vaccine_name: str,
        due_date: date,
        protocol_id: UUID | None = None,
    ) -> PetVaccineSchedule:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            pet_id=pet_id,
            owner_id=owner_id,
            protocol_id=protocol_id,
            vaccine_name=vaccine_name,
            due_date=due_date,
            status=ScheduleStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

    def as_of(self, today: date) -> PetVaccineSchedule:
        """Copy carrying the read-time status for ``today``."""
        return replace(self, status=effective_status(self.status, self.due_date, today))

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
