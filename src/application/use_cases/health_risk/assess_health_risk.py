from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.services.health_risk import HealthRiskResult, calculate_health_risk


@dataclass(slots=True)
class HealthRiskAssessment:
    pet_id: UUID
    result: HealthRiskResult

    @property
    def label(self) -> str:
        return self.result.level.label


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    pet_id: UUID,
    *,
    today: date | None = None,
) -> HealthRiskAssessment:
    # one session: the pet and its vaccinations are read one after the other
    pet = await uow.pets.get(owner_id, pet_id)
    if not pet:
        raise NotFound("Pet not found")
    vaccinations = await uow.vaccinations.list_by_pet(pet.id)
    result = calculate_health_risk(pet, vaccinations, today=today)
    return HealthRiskAssessment(pet_id=pet.id, result=result)
