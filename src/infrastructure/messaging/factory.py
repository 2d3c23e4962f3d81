from __future__ import annotations

from src.config.settings import Settings
from src.infrastructure.messaging.models import MessagingService
from src.infrastructure.messaging.providers.logging_provider import LoggingMessagingService
from src.infrastructure.messaging.providers.twilio_provider import TwilioWhatsAppService


def build_messaging_service(settings: Settings) -> MessagingService:
    if settings.messaging_provider.lower() == "twilio":
        token = settings.twilio_auth_token
        return TwilioWhatsAppService(
            account_sid=settings.twilio_account_sid,
            auth_token=token.get_secret_value() if token else None,
            from_number=settings.twilio_whatsapp_number,
            api_base_url=settings.twilio_api_base_url,
        )
    return LoggingMessagingService()
