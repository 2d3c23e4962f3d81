from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.vaccine_schedule import PetVaccineSchedule


class VaccineScheduleRepository(Protocol):
    async def add_many(self, entries: list[PetVaccineSchedule]) -> list[PetVaccineSchedule]: ...

    async def get(self, owner_id: UUID, schedule_id: UUID) -> PetVaccineSchedule | None: ...

    async def list_by_pet(self, pet_id: UUID) -> list[PetVaccineSchedule]: ...

    async def count_by_pet(self, pet_id: UUID) -> int: ...

    async def list_open_due_before(
        self, owner_id: UUID, until: date
    ) -> list[PetVaccineSchedule]: ...

    async def update(self, entry: PetVaccineSchedule) -> PetVaccineSchedule: ...

    async def delete_for_pet(self, owner_id: UUID, pet_id: UUID) -> int: ...
