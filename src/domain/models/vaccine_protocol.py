from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(slots=True, frozen=True)
class VaccineProtocol:
    id: UUID
    species: str  # lower-case key, e.g. "dog"
    vaccine_name: str
    is_core: bool
    min_age_weeks: int
    dose_number: int = 1
    max_age_weeks: int | None = None
    interval_weeks: int | None = None
    booster_interval_months: int | None = None
    description: str | None = None
