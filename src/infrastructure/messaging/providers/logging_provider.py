from __future__ import annotations

import logging
from uuid import uuid4

from src.infrastructure.messaging.models import MessagingService, OutboundMessage, SendResult

logger = logging.getLogger(__name__)


class LoggingMessagingService(MessagingService):
    async def send(self, message: OutboundMessage) -> SendResult:
        sid = f"LOG{uuid4().hex}"
        logger.info(
            "Sending message (logging provider): to=%s body_len=%s sid=%s",
            message.to,
            len(message.body),
            sid,
        )
        return SendResult(success=True, sid=sid)
