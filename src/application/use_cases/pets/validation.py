from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.application.errors import ValidationError
from src.domain.value_objects.species import Species

NAME_MAX_LENGTH = 50
MAX_WEIGHT_KG = Decimal("200")


def normalize_name(name: str) -> str:
    value = (name or "").strip()
    if not value:
        raise ValidationError("Pet name is required")
    if len(value) > NAME_MAX_LENGTH:
        raise ValidationError(f"Pet name must be at most {NAME_MAX_LENGTH} characters")
    return value


def parse_species(value: str) -> Species:
    species = Species.parse(value)
    if species is None:
        raise ValidationError(
            "Species must be Dog or Cat", details={"species": value}
        )
    return species


def ensure_birth_date(date_of_birth: date, today: date) -> None:
    if date_of_birth > today:
        raise ValidationError("Date of birth cannot be in the future")


def ensure_weight(weight_kg: Decimal | None) -> None:
    if weight_kg is None:
        return
    if weight_kg <= 0 or weight_kg > MAX_WEIGHT_KG:
        raise ValidationError(f"Weight must be greater than 0 and at most {MAX_WEIGHT_KG} kg")


def blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
