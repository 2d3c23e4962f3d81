from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.use_cases.timeline import add_event, delete_event, list_events, update_event
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.timeline import (
    TimelineEventCreate,
    TimelineEventResponse,
    TimelineEventUpdate,
)

router = APIRouter(prefix="", tags=["timeline"])


@router.get("/pets/{pet_id}/timeline", response_model=list[TimelineEventResponse])
async def list_timeline_endpoint(
    pet_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[TimelineEventResponse]:
    events = await list_events.execute(uow, context.owner_id, pet_id)
    return [TimelineEventResponse.model_validate(event) for event in events]


@router.post(
    "/pets/{pet_id}/timeline",
    response_model=TimelineEventResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_timeline_event_endpoint(
    pet_id: UUID,
    payload: TimelineEventCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> TimelineEventResponse:
    event = await add_event.execute(
        uow,
        context.owner_id,
        pet_id,
        add_event.AddEventInput(**payload.model_dump()),
    )
    return TimelineEventResponse.model_validate(event)


@router.put("/timeline/{event_id}", response_model=TimelineEventResponse)
async def update_timeline_event_endpoint(
    event_id: UUID,
    payload: TimelineEventUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> TimelineEventResponse:
    event = await update_event.execute(
        uow,
        context.owner_id,
        event_id,
        update_event.UpdateEventInput(**payload.model_dump(exclude_unset=True)),
    )
    return TimelineEventResponse.model_validate(event)


@router.delete("/timeline/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_timeline_event_endpoint(
    event_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> None:
    await delete_event.execute(uow, context.owner_id, event_id)
