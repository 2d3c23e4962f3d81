from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Vaccination:
    """A vaccine actually administered, logged manually by the owner."""

    id: UUID
    pet_id: UUID
    owner_id: UUID
    vaccine_name: str
    date_given: date
    next_due_date: date | None = None
    vet_name: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        pet_id: UUID,
        owner_id: UUID,
        vaccine_name: str,
        date_given: date,
        next_due_date: date | None = None,
        vet_name: str | None = None,
        notes: str | None = None,
    ) -> Vaccination:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            pet_id=pet_id,
            owner_id=owner_id,
            vaccine_name=vaccine_name,
            date_given=date_given,
            next_due_date=next_due_date,
            vet_name=vet_name,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    def is_overdue(self, today: date) -> bool:
        return self.next_due_date is not None and self.next_due_date < today
