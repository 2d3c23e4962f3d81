from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.pets import get_pet
from src.application.use_cases.vaccine_schedule import (
    complete_scheduled_vaccine,
    generate_schedule,
    list_schedule,
    list_upcoming,
    skip_scheduled_vaccine,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.vaccine_schedules import (
    CompleteScheduleRequest,
    GenerateScheduleRequest,
    GenerateScheduleResponse,
    ScheduleEntryResponse,
    SkipScheduleRequest,
    UpcomingVaccinationResponse,
)

router = APIRouter(prefix="", tags=["vaccine-schedule"])


@router.get("/pets/{pet_id}/vaccine-schedule", response_model=list[ScheduleEntryResponse])
async def list_schedule_endpoint(
    pet_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ScheduleEntryResponse]:
    entries = await list_schedule.execute(uow, context.owner_id, pet_id)
    return [ScheduleEntryResponse.model_validate(entry) for entry in entries]


@router.post("/pets/{pet_id}/vaccine-schedule/generate", response_model=GenerateScheduleResponse)
async def generate_schedule_endpoint(
    pet_id: UUID,
    payload: GenerateScheduleRequest | None = None,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> GenerateScheduleResponse:
    payload = payload or GenerateScheduleRequest()
    pet = await get_pet.execute(uow, context.owner_id, pet_id)
    result = await generate_schedule.execute(
        uow,
        context.owner_id,
        generate_schedule.GenerateScheduleInput(
            pet_id=pet.id,
            species=pet.species,
            date_of_birth=pet.date_of_birth,
            skip_if_existing=payload.skip_if_existing,
        ),
    )
    return GenerateScheduleResponse(
        success=result.success,
        error=result.error,
        created=[ScheduleEntryResponse.model_validate(entry) for entry in result.created],
    )


@router.get("/vaccine-schedule/upcoming", response_model=list[UpcomingVaccinationResponse])
async def upcoming_endpoint(
    days: int = Query(list_upcoming.DEFAULT_WINDOW_DAYS, ge=1, le=365),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[UpcomingVaccinationResponse]:
    items = await list_upcoming.execute(uow, context.owner_id, days=days)
    return [
        UpcomingVaccinationResponse(
            **ScheduleEntryResponse.model_validate(item.entry).model_dump(),
            pet_name=item.pet.name,
            species=item.pet.species,
        )
        for item in items
    ]


@router.post("/vaccine-schedule/{schedule_id}/complete", response_model=ScheduleEntryResponse)
async def complete_endpoint(
    schedule_id: UUID,
    payload: CompleteScheduleRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ScheduleEntryResponse:
    entry = await complete_scheduled_vaccine.execute(
        uow,
        context.owner_id,
        schedule_id,
        complete_scheduled_vaccine.CompleteInput(
            completed_date=payload.completed_date or date.today(),
            notes=payload.notes,
        ),
    )
    return ScheduleEntryResponse.model_validate(entry)


@router.post("/vaccine-schedule/{schedule_id}/skip", response_model=ScheduleEntryResponse)
async def skip_endpoint(
    schedule_id: UUID,
    payload: SkipScheduleRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ScheduleEntryResponse:
    entry = await skip_scheduled_vaccine.execute(
        uow,
        context.owner_id,
        schedule_id,
        skip_scheduled_vaccine.SkipInput(reason=payload.reason),
    )
    return ScheduleEntryResponse.model_validate(entry)
