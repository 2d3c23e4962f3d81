from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class NotificationPreference:
    id: UUID
    owner_id: UUID
    whatsapp_number: str | None = None
    whatsapp_enabled: bool = False
    email_enabled: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def default_for(cls, owner_id: UUID) -> NotificationPreference:
        return cls(id=uuid4(), owner_id=owner_id)
