from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class OutboundMessage:
    to: str
    body: str


@dataclass(slots=True)
class SendResult:
    success: bool
    sid: str | None = None


class MessagingService:
    async def send(self, message: OutboundMessage) -> SendResult:  # pragma: no cover - interface
        raise NotImplementedError
