from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.notification_preference import NotificationPreference

WHATSAPP_NUMBER_MAX_LENGTH = 20


@dataclass(slots=True)
class SavePreferencesInput:
    whatsapp_number: str | None = None
    whatsapp_enabled: bool = False
    email_enabled: bool = True


async def execute(
    uow: UnitOfWork, owner_id: UUID, payload: SavePreferencesInput
) -> NotificationPreference:
    number = (payload.whatsapp_number or "").strip() or None
    if number and len(number) > WHATSAPP_NUMBER_MAX_LENGTH:
        raise ValidationError("WhatsApp number is too long")
    if payload.whatsapp_enabled and not number:
        raise ValidationError("A WhatsApp number is required to enable WhatsApp notifications")

    preference = await uow.notification_preferences.get_for_owner(owner_id)
    preference = preference or NotificationPreference.default_for(owner_id)
    preference.whatsapp_number = number
    preference.whatsapp_enabled = payload.whatsapp_enabled
    preference.email_enabled = payload.email_enabled
    saved = await uow.notification_preferences.upsert(preference)
    await uow.commit()
    return saved
