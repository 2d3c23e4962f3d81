from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.pet import Pet


class PetRepository(Protocol):
    async def add(self, pet: Pet) -> Pet: ...

    async def get(self, owner_id: UUID, pet_id: UUID) -> Pet | None: ...

    async def get_by_unique_pet_id(self, unique_pet_id: str) -> Pet | None: ...

    async def list_for_owner(self, owner_id: UUID) -> list[Pet]: ...

    async def update(self, pet: Pet) -> Pet: ...

    async def delete(self, owner_id: UUID, pet_id: UUID) -> bool: ...
