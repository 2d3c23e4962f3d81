from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable
from uuid import UUID

from src.domain.models.vaccine_protocol import VaccineProtocol
from src.utils.dates import add_months, add_weeks, age_in_weeks

# Pets younger than this follow the puppy/kitten series, older pets the adult boosters
ADULT_AGE_WEEKS = 52


@dataclass(slots=True, frozen=True)
class PlannedDose:
    protocol_id: UUID | None
    vaccine_name: str
    due_date: date


def is_applicable(protocol: VaccineProtocol, pet_age_weeks: int) -> bool:
    if pet_age_weeks < ADULT_AGE_WEEKS:
        return protocol.min_age_weeks < ADULT_AGE_WEEKS
    return (
        protocol.min_age_weeks >= ADULT_AGE_WEEKS
        or protocol.booster_interval_months is not None
    )


def due_date_for(
    protocol: VaccineProtocol,
    *,
    date_of_birth: date,
    pet_age_weeks: int,
    today: date,
) -> date | None:
    """Due date for a single protocol, or None when the pet has aged out of it."""
    if pet_age_weeks < protocol.min_age_weeks:
        return add_weeks(date_of_birth, protocol.min_age_weeks)
    if protocol.max_age_weeks and pet_age_weeks > protocol.max_age_weeks:
        return None
    if pet_age_weeks >= ADULT_AGE_WEEKS and protocol.booster_interval_months:
        return add_months(today, protocol.booster_interval_months)
    return today


def plan_schedule(
    protocols: Iterable[VaccineProtocol],
    *,
    date_of_birth: date,
    today: date,
) -> list[PlannedDose]:
    """Project one dose per applicable protocol, in protocol order."""
    pet_age_weeks = age_in_weeks(date_of_birth, today)
    planned: list[PlannedDose] = []
    for protocol in protocols:
        if not is_applicable(protocol, pet_age_weeks):
            continue
        due = due_date_for(
            protocol,
            date_of_birth=date_of_birth,
            pet_age_weeks=pet_age_weeks,
            today=today,
        )
        if due is None:
            continue
        planned.append(
            PlannedDose(protocol_id=protocol.id, vaccine_name=protocol.vaccine_name, due_date=due)
        )
    return planned
