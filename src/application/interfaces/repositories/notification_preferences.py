from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.notification_preference import NotificationPreference


class NotificationPreferenceRepository(Protocol):
    async def get_for_owner(self, owner_id: UUID) -> NotificationPreference | None: ...

    async def upsert(self, preference: NotificationPreference) -> NotificationPreference: ...
