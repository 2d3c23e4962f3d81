from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from src.application.use_cases.health_risk import assess_health_risk
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.health_risk import HealthRiskResponse

router = APIRouter(prefix="", tags=["health-risk"])


@router.get("/pets/{pet_id}/health-risk", response_model=HealthRiskResponse)
async def health_risk_endpoint(
    pet_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthRiskResponse:
    assessment = await assess_health_risk.execute(uow, context.owner_id, pet_id)
    return HealthRiskResponse(
        pet_id=assessment.pet_id,
        level=assessment.result.level,
        label=assessment.label,
        score=assessment.result.score,
        factors=assessment.result.factors,
    )
