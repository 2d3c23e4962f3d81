from __future__ import annotations

import base64
from urllib.parse import parse_qs

import httpx
import pytest

from src.application.errors import MessagingError
from src.infrastructure.messaging.models import OutboundMessage
from src.infrastructure.messaging.providers.twilio_provider import (
    TwilioWhatsAppService,
    as_whatsapp_address,
)


def make_service(handler, **overrides) -> TwilioWhatsAppService:
    options = {
        "account_sid": "AC123",
        "auth_token": "token",
        "from_number": "+14155238886",
        "api_base_url": "https://api.twilio.test/2010-04-01",
    }
    options.update(overrides)
    return TwilioWhatsAppService(transport=httpx.MockTransport(handler), **options)


def test_whatsapp_prefix_added_once():
    assert as_whatsapp_address("+593991234567") == "whatsapp:+593991234567"
    assert as_whatsapp_address("whatsapp:+593991234567") == "whatsapp:+593991234567"


async def test_send_posts_form_with_basic_auth():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["form"] = parse_qs(request.content.decode())
        return httpx.Response(201, json={"sid": "SM42", "status": "queued"})

    service = make_service(handler)
    result = await service.send(OutboundMessage(to="+593991234567", body="hello"))

    assert result.success is True
    assert result.sid == "SM42"
    assert seen["url"] == "https://api.twilio.test/2010-04-01/Accounts/AC123/Messages.json"
    expected = base64.b64encode(b"AC123:token").decode()
    assert seen["auth"] == f"Basic {expected}"
    assert seen["form"] == {
        "From": ["whatsapp:+14155238886"],
        "To": ["whatsapp:+593991234567"],
        "Body": ["hello"],
    }


async def test_provider_error_raises_messaging_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"code": 21211, "message": "Invalid 'To' Phone Number"})

    service = make_service(handler)
    with pytest.raises(MessagingError) as excinfo:
        await service.send(OutboundMessage(to="bad", body="hello"))
    assert excinfo.value.message == "Invalid 'To' Phone Number"
    assert excinfo.value.details == {"status": 400, "twilio_code": 21211}


async def test_missing_credentials_raise_before_any_request():
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not run
        raise AssertionError("no request expected")

    service = make_service(handler, auth_token=None)
    with pytest.raises(MessagingError):
        await service.send(OutboundMessage(to="+1", body="hi"))


async def test_transport_failure_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    service = make_service(handler)
    with pytest.raises(MessagingError):
        await service.send(OutboundMessage(to="+1", body="hi"))


async def test_non_json_error_page_raises_messaging_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            502, text="<html><body>Bad Gateway</body></html>", headers={"Content-Type": "text/html"}
        )

    service = make_service(handler)
    with pytest.raises(MessagingError) as excinfo:
        await service.send(OutboundMessage(to="+1", body="hi"))
    assert excinfo.value.message == "Failed to send WhatsApp message"
    assert excinfo.value.details == {"status": 502, "twilio_code": None}
