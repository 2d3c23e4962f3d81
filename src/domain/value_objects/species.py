from __future__ import annotations

from enum import Enum


class Species(str, Enum):
    DOG = "Dog"
    CAT = "Cat"

    @property
    def protocol_key(self) -> str:
        """Key used by the vaccine_protocols table (lower-case)."""
        return self.value.lower()

    @classmethod
    def parse(cls, value: str) -> Species | None:
        normalized = (value or "").strip().lower()
        for species in cls:
            if species.protocol_key == normalized:
                return species
        return None
