from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NotificationPreferencesRequest(BaseModel):
    whatsapp_number: str | None = Field(default=None, max_length=20)
    whatsapp_enabled: bool = False
    email_enabled: bool = True


class NotificationPreferencesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    whatsapp_number: str | None
    whatsapp_enabled: bool
    email_enabled: bool


class SendTestMessageRequest(BaseModel):
    to: str | None = Field(default=None, max_length=20, description="Defaults to the saved number")


class SendTestMessageResponse(BaseModel):
    success: bool
    sid: str | None = None
