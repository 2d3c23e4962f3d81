from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.vaccination import Vaccination


class VaccinationRepository(Protocol):
    async def add(self, vaccination: Vaccination) -> Vaccination: ...

    async def get(self, owner_id: UUID, vaccination_id: UUID) -> Vaccination | None: ...

    async def list_by_pet(self, pet_id: UUID) -> list[Vaccination]: ...

    async def latest_for_pet(self, pet_id: UUID) -> Vaccination | None: ...

    async def update(self, vaccination: Vaccination) -> Vaccination: ...

    async def delete(self, owner_id: UUID, vaccination_id: UUID) -> bool: ...

    async def delete_for_pet(self, owner_id: UUID, pet_id: UUID) -> int: ...
