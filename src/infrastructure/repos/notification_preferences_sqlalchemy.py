from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.notification_preferences import (
    NotificationPreferenceRepository,
)
from src.domain.models.notification_preference import NotificationPreference
from src.infrastructure.db.orm.notification_preference import NotificationPreferenceORM


class NotificationPreferencesSQLAlchemyRepository(NotificationPreferenceRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: NotificationPreferenceORM) -> NotificationPreference:
        return NotificationPreference(
            id=orm.id,
            owner_id=orm.owner_id,
            whatsapp_number=orm.whatsapp_number,
            whatsapp_enabled=orm.whatsapp_enabled,
            email_enabled=orm.email_enabled,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def get_for_owner(self, owner_id: UUID) -> NotificationPreference | None:
        result = await self.session.execute(
            select(NotificationPreferenceORM).where(NotificationPreferenceORM.owner_id == owner_id)
        )
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def upsert(self, preference: NotificationPreference) -> NotificationPreference:
        result = await self.session.execute(
            select(NotificationPreferenceORM).where(
                NotificationPreferenceORM.owner_id == preference.owner_id
            )
        )
        orm = result.scalar_one_or_none()
        if orm is None:
            orm = NotificationPreferenceORM(
                id=preference.id,
                owner_id=preference.owner_id,
                whatsapp_number=preference.whatsapp_number,
                whatsapp_enabled=preference.whatsapp_enabled,
                email_enabled=preference.email_enabled,
                created_at=preference.created_at,
                updated_at=preference.updated_at,
            )
            self.session.add(orm)
            await self.session.flush()
            return self._to_domain(orm)
        orm.whatsapp_number = preference.whatsapp_number
        orm.whatsapp_enabled = preference.whatsapp_enabled
        orm.email_enabled = preference.email_enabled
        orm.updated_at = datetime.now(timezone.utc)
        await self.session.flush()
        return self._to_domain(orm)
