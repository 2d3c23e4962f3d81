from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.notification_preference import NotificationPreference


async def execute(uow: UnitOfWork, owner_id: UUID) -> NotificationPreference:
    """Stored preferences, or unsaved defaults when the owner never saved any."""
    preference = await uow.notification_preferences.get_for_owner(owner_id)
    return preference or NotificationPreference.default_for(owner_id)
