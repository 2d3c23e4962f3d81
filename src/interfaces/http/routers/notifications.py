from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.use_cases.notifications import (
    get_preferences,
    save_preferences,
    send_test_message,
)
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.messaging.models import MessagingService
from src.interfaces.http.deps import get_auth_context, get_messaging_service, get_uow
from src.interfaces.http.schemas.notifications import (
    NotificationPreferencesRequest,
    NotificationPreferencesResponse,
    SendTestMessageRequest,
    SendTestMessageResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/preferences", response_model=NotificationPreferencesResponse)
async def get_preferences_endpoint(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> NotificationPreferencesResponse:
    preference = await get_preferences.execute(uow, context.owner_id)
    return NotificationPreferencesResponse.model_validate(preference)


@router.put("/preferences", response_model=NotificationPreferencesResponse)
async def save_preferences_endpoint(
    payload: NotificationPreferencesRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> NotificationPreferencesResponse:
    preference = await save_preferences.execute(
        uow,
        context.owner_id,
        save_preferences.SavePreferencesInput(**payload.model_dump()),
    )
    return NotificationPreferencesResponse.model_validate(preference)


@router.post("/test", response_model=SendTestMessageResponse)
async def send_test_message_endpoint(
    payload: SendTestMessageRequest | None = None,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    messaging: MessagingService = Depends(get_messaging_service),
) -> SendTestMessageResponse:
    result = await send_test_message.execute(
        uow,
        messaging,
        context.owner_id,
        to=payload.to if payload else None,
    )
    return SendTestMessageResponse(success=result.success, sid=result.sid)
