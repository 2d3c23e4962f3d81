from __future__ import annotations

import logging

import httpx

from src.application.errors import MessagingError
from src.infrastructure.messaging.models import MessagingService, OutboundMessage, SendResult

logger = logging.getLogger(__name__)

WHATSAPP_PREFIX = "whatsapp:"


def as_whatsapp_address(number: str) -> str:
    number = number.strip()
    return number if number.startswith(WHATSAPP_PREFIX) else f"{WHATSAPP_PREFIX}{number}"


def _json_body(response: httpx.Response) -> dict:
    # proxies in front of the API can answer with HTML error pages
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class TwilioWhatsAppService(MessagingService):
    """WhatsApp delivery through the Twilio Messages REST API."""

    def __init__(
        self,
        *,
        account_sid: str | None,
        auth_token: str | None,
        from_number: str | None,
        api_base_url: str = "https://api.twilio.com/2010-04-01",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            account_sid: Twilio account SID, also used as the basic-auth user
            auth_token: Twilio auth token
            from_number: WhatsApp-enabled sender number
            api_base_url: Twilio REST API root
            timeout: HTTP request timeout in seconds
            transport: optional httpx transport, used by tests
        """
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def messages_url(self) -> str:
        return f"{self.api_base_url}/Accounts/{self.account_sid}/Messages.json"

    async def send(self, message: OutboundMessage) -> SendResult:
        if not self.account_sid or not self.auth_token or not self.from_number:
            raise MessagingError("Twilio credentials not configured")

        form = {
            "From": as_whatsapp_address(self.from_number),
            "To": as_whatsapp_address(message.to),
            "Body": message.body,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                auth=(self.account_sid, self.auth_token),
                transport=self._transport,
            ) as client:
                response = await client.post(self.messages_url, data=form)
        except httpx.HTTPError as exc:
            logger.error("Twilio HTTP error: %s", exc)
            raise MessagingError("Failed to send WhatsApp message") from exc

        result = _json_body(response)
        if response.status_code >= 400:
            logger.error("Twilio API error: %s - %s", response.status_code, response.text)
            raise MessagingError(
                result.get("message") or "Failed to send WhatsApp message",
                details={"status": response.status_code, "twilio_code": result.get("code")},
            )

        logger.info("WhatsApp message sent via Twilio: to=%s sid=%s", form["To"], result.get("sid"))
        return SendResult(success=True, sid=result.get("sid"))
