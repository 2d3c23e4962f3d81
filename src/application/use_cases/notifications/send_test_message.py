from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.messaging.models import MessagingService, OutboundMessage, SendResult

logger = logging.getLogger(__name__)

TEST_MESSAGE = (
    "🐾 PetCare Test: Your WhatsApp notifications are working! "
    "You'll receive important updates about your pets here."
)


async def execute(
    uow: UnitOfWork,
    messaging: MessagingService,
    owner_id: UUID,
    *,
    to: str | None = None,
) -> SendResult:
    number = (to or "").strip()
    if not number:
        preference = await uow.notification_preferences.get_for_owner(owner_id)
        number = (preference.whatsapp_number or "").strip() if preference else ""
    if not number:
        raise ValidationError("No WhatsApp number configured")

    result = await messaging.send(OutboundMessage(to=number, body=TEST_MESSAGE))
    logger.info("Test message sent for owner %s: sid=%s", owner_id, result.sid)
    return result
