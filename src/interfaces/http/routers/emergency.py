from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.use_cases.pets import get_emergency_profile
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.emergency import (
    EmergencyPet,
    EmergencyProfileResponse,
    EmergencyTimelineEvent,
    EmergencyVaccination,
)

router = APIRouter(prefix="/emergency", tags=["emergency"])


@router.get("/{unique_pet_id}", response_model=EmergencyProfileResponse)
async def emergency_profile_endpoint(
    unique_pet_id: str,
    uow=Depends(get_uow),
) -> EmergencyProfileResponse:
    """Public profile behind the pet's QR code. No authentication."""
    profile = await get_emergency_profile.execute(uow, unique_pet_id)
    last = profile.last_vaccination
    return EmergencyProfileResponse(
        pet=EmergencyPet.model_validate(profile.pet),
        last_vaccination=EmergencyVaccination.model_validate(last) if last else None,
        timeline=[EmergencyTimelineEvent.model_validate(event) for event in profile.timeline],
    )
