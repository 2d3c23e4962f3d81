from __future__ import annotations

from typing import Protocol

from src.domain.models.vaccine_protocol import VaccineProtocol


class VaccineProtocolRepository(Protocol):
    async def list_for_species(self, species: str) -> list[VaccineProtocol]:
        """Protocols for a lower-case species key, ordered by min_age_weeks ascending."""
        ...

    async def add_many(self, protocols: list[VaccineProtocol]) -> None: ...
