from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import NotFound
from src.application.interfaces.repositories.timeline import TimelineRepository
from src.domain.models.timeline_event import HealthTimelineEvent
from src.infrastructure.db.orm.timeline_event import HealthTimelineEventORM


class TimelineSQLAlchemyRepository(TimelineRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HealthTimelineEventORM) -> HealthTimelineEvent:
        return HealthTimelineEvent(
            id=orm.id,
            pet_id=orm.pet_id,
            owner_id=orm.owner_id,
            event_type=orm.event_type,
            event_date=orm.event_date,
            title=orm.title,
            description=orm.description,
            severity=orm.severity,
            metadata=orm.event_metadata,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, event: HealthTimelineEvent) -> HealthTimelineEvent:
        orm = HealthTimelineEventORM(
            id=event.id,
            pet_id=event.pet_id,
            owner_id=event.owner_id,
            event_type=event.event_type,
            event_date=event.event_date,
            title=event.title,
            description=event.description,
            severity=event.severity,
            event_metadata=event.metadata,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, owner_id: UUID, event_id: UUID) -> HealthTimelineEvent | None:
        stmt = (
            select(HealthTimelineEventORM)
            .where(HealthTimelineEventORM.owner_id == owner_id)
            .where(HealthTimelineEventORM.id == event_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_by_pet(
        self, pet_id: UUID, *, limit: int | None = None
    ) -> list[HealthTimelineEvent]:
        stmt = (
            select(HealthTimelineEventORM)
            .where(HealthTimelineEventORM.pet_id == pet_id)
            .order_by(
                HealthTimelineEventORM.event_date.desc(),
                HealthTimelineEventORM.created_at.desc(),
            )
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, event: HealthTimelineEvent) -> HealthTimelineEvent:
        orm = await self.session.get(HealthTimelineEventORM, event.id)
        if not orm:
            raise NotFound("Timeline event not found")

        orm.event_date = event.event_date
        orm.title = event.title
        orm.description = event.description
        orm.severity = event.severity
        orm.updated_at = event.updated_at

        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, owner_id: UUID, event_id: UUID) -> bool:
        stmt = (
            delete(HealthTimelineEventORM)
            .where(HealthTimelineEventORM.owner_id == owner_id)
            .where(HealthTimelineEventORM.id == event_id)
        )
        result = await self.session.execute(stmt)
        return bool(result.rowcount)

    async def delete_for_pet(self, owner_id: UUID, pet_id: UUID) -> int:
        stmt = (
            delete(HealthTimelineEventORM)
            .where(HealthTimelineEventORM.owner_id == owner_id)
            .where(HealthTimelineEventORM.pet_id == pet_id)
        )
        result = await self.session.execute(stmt)
        return int(result.rowcount or 0)
