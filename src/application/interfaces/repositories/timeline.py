from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.timeline_event import HealthTimelineEvent


class TimelineRepository(Protocol):
    async def add(self, event: HealthTimelineEvent) -> HealthTimelineEvent: ...

    async def get(self, owner_id: UUID, event_id: UUID) -> HealthTimelineEvent | None: ...

    async def list_by_pet(
        self, pet_id: UUID, *, limit: int | None = None
    ) -> list[HealthTimelineEvent]: ...

    async def update(self, event: HealthTimelineEvent) -> HealthTimelineEvent: ...

    async def delete(self, owner_id: UUID, event_id: UUID) -> bool: ...

    async def delete_for_pet(self, owner_id: UUID, pet_id: UUID) -> int: ...
