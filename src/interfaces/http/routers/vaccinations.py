from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.use_cases.vaccinations import (
    create_vaccination,
    delete_vaccination,
    get_latest_vaccination,
    list_vaccinations,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.vaccinations import VaccinationCreate, VaccinationResponse

router = APIRouter(prefix="", tags=["vaccinations"])


@router.get("/pets/{pet_id}/vaccinations", response_model=list[VaccinationResponse])
async def list_vaccinations_endpoint(
    pet_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[VaccinationResponse]:
    items = await list_vaccinations.execute(uow, context.owner_id, pet_id)
    return [VaccinationResponse.model_validate(item) for item in items]


@router.post(
    "/pets/{pet_id}/vaccinations",
    response_model=VaccinationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_vaccination_endpoint(
    pet_id: UUID,
    payload: VaccinationCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> VaccinationResponse:
    created = await create_vaccination.execute(
        uow,
        context.owner_id,
        pet_id,
        create_vaccination.CreateVaccinationInput(**payload.model_dump()),
    )
    return VaccinationResponse.model_validate(created)


@router.get("/pets/{pet_id}/vaccinations/latest", response_model=VaccinationResponse | None)
async def latest_vaccination_endpoint(
    pet_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> VaccinationResponse | None:
    latest = await get_latest_vaccination.execute(uow, context.owner_id, pet_id)
    return VaccinationResponse.model_validate(latest) if latest else None


@router.delete("/vaccinations/{vaccination_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vaccination_endpoint(
    vaccination_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> None:
    await delete_vaccination.execute(uow, context.owner_id, vaccination_id)
