"""Rule-based health risk scoring.

Points are additive:

- overdue core vaccine: 3 each, overdue optional vaccine: 1 each
- senior pet (7+ years for dogs, 10+ for cats): 1
- chronic conditions: 1 per comma-separated entry, at most 2
- no vaccination records at all: 2
- any vaccine more than 60 days overdue: 2

A score of 0 is ``low``, 1-3 ``medium`` and 4 or more ``high``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol, Sequence

from src.domain.value_objects.risk_level import RiskLevel
from src.utils.dates import age_in_years, days_past

CORE_VACCINE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Dog": ("Rabies", "DHPP", "Distemper", "Parvovirus", "Parvo"),
    "Cat": ("Rabies", "FVRCP", "Panleukopenia", "Calicivirus"),
}

SENIOR_AGE_YEARS: dict[str, int] = {"cat": 10}
DEFAULT_SENIOR_AGE_YEARS = 7

SEVERELY_OVERDUE_DAYS = 60
MAX_CHRONIC_CONDITION_POINTS = 2


class RiskSubject(Protocol):
    species: str
    date_of_birth: date
    chronic_conditions: str | None


class VaccinationEntry(Protocol):
    vaccine_name: str
    next_due_date: date | None


@dataclass(slots=True)
class HealthRiskResult:
    level: RiskLevel
    score: int
    factors: list[str] = field(default_factory=list)


def is_core_vaccine(species: str, vaccine_name: str) -> bool:
    keywords = CORE_VACCINE_KEYWORDS.get(species.strip().capitalize(), ())
    name = vaccine_name.lower()
    return any(keyword.lower() in name for keyword in keywords)


def senior_age_for(species: str) -> int:
    return SENIOR_AGE_YEARS.get(species.lower(), DEFAULT_SENIOR_AGE_YEARS)


def chronic_condition_points(chronic_conditions: str | None) -> int:
    if not chronic_conditions or not chronic_conditions.strip():
        return 0
    return min(len(chronic_conditions.split(",")), MAX_CHRONIC_CONDITION_POINTS)


def calculate_health_risk(
    pet: RiskSubject,
    vaccinations: Sequence[VaccinationEntry],
    *,
    today: date | None = None,
) -> HealthRiskResult:
    today = today or date.today()
    score = 0
    factors: list[str] = []

    overdue = [v for v in vaccinations if v.next_due_date is not None and v.next_due_date < today]
    for vaccination in overdue:
        if is_core_vaccine(pet.species, vaccination.vaccine_name):
            score += 3
            factors.append(f"Overdue core vaccine: {vaccination.vaccine_name}")
        else:
            score += 1
            factors.append(f"Overdue optional vaccine: {vaccination.vaccine_name}")

    age = age_in_years(pet.date_of_birth, today)
    if age >= senior_age_for(pet.species):
        score += 1
        factors.append(f"Senior pet ({age} years old)")

    condition_points = chronic_condition_points(pet.chronic_conditions)
    if condition_points:
        score += condition_points
        factors.append("Has chronic conditions")

    if not vaccinations:
        score += 2
        factors.append("No vaccination records")

    severely_overdue = [
        v for v in overdue if days_past(v.next_due_date, today) > SEVERELY_OVERDUE_DAYS
    ]
    if severely_overdue:
        score += 2
        factors.append(f"{len(severely_overdue)} vaccine(s) severely overdue (60+ days)")

    return HealthRiskResult(level=RiskLevel.from_score(score), score=score, factors=factors)
