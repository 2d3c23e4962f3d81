from __future__ import annotations

from enum import Enum


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Risk"

    @classmethod
    def from_score(cls, score: int) -> RiskLevel:
        if score == 0:
            return cls.LOW
        if score <= 3:
            return cls.MEDIUM
        return cls.HIGH
