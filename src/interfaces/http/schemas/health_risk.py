from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel

from src.domain.value_objects.risk_level import RiskLevel


class HealthRiskResponse(BaseModel):
    pet_id: UUID
    level: RiskLevel
    label: str
    score: int
    factors: list[str]
