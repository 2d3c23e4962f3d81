from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any
from uuid import UUID, uuid4


@dataclass(slots=True)
class HealthTimelineEvent:
    id: UUID
    pet_id: UUID
    owner_id: UUID
    event_type: str  # TimelineEventType
    event_date: date
    title: str
    description: str | None = None
    severity: str | None = None
    metadata: dict[str, Any] | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        pet_id: UUID,
        owner_id: UUID,
        event_type: str,
        event_date: date,
        title: str,
        description: str | None = None,
        severity: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> HealthTimelineEvent:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            pet_id=pet_id,
            owner_id=owner_id,
            event_type=event_type,
            event_date=event_date,
            title=title,
            description=description or None,
            severity=severity or None,
            metadata=dict(metadata) if metadata else None,
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
