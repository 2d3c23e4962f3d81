from __future__ import annotations

from datetime import date, timedelta
from uuid import uuid4

from src.domain.models.vaccine_protocol import VaccineProtocol
from src.domain.services.vaccine_schedule import plan_schedule

TODAY = date(2024, 6, 15)


def protocol(name: str, min_age: int, **kwargs) -> VaccineProtocol:
    return VaccineProtocol(
        id=uuid4(),
        species="dog",
        vaccine_name=name,
        is_core=kwargs.pop("is_core", True),
        min_age_weeks=min_age,
        **kwargs,
    )


def test_young_pet_gets_due_dates_from_birth():
    dob = TODAY - timedelta(weeks=2)
    protocols = [protocol("DHPP", 6), protocol("Rabies", 12, booster_interval_months=12)]

    planned = plan_schedule(protocols, date_of_birth=dob, today=TODAY)

    assert [p.vaccine_name for p in planned] == ["DHPP", "Rabies"]
    assert planned[0].due_date == dob + timedelta(weeks=6)
    assert planned[1].due_date == dob + timedelta(weeks=12)
    assert all(p.due_date != TODAY for p in planned)


def test_young_pet_ignores_adult_protocols():
    dob = TODAY - timedelta(weeks=10)
    protocols = [protocol("DHPP", 6), protocol("DHPP Booster", 52, booster_interval_months=36)]

    planned = plan_schedule(protocols, date_of_birth=dob, today=TODAY)

    assert [p.vaccine_name for p in planned] == ["DHPP"]
    # already old enough: due now
    assert planned[0].due_date == TODAY


def test_protocol_past_max_age_is_skipped():
    dob = TODAY - timedelta(weeks=30)
    protocols = [protocol("DHPP", 6, max_age_weeks=20), protocol("Rabies", 12)]

    planned = plan_schedule(protocols, date_of_birth=dob, today=TODAY)

    assert [p.vaccine_name for p in planned] == ["Rabies"]


def test_adult_with_booster_is_due_after_booster_interval():
    dob = date(2020, 3, 1)
    protocols = [
        protocol("DHPP", 6),
        protocol("Rabies", 12, booster_interval_months=12),
        protocol("DHPP Booster", 52, booster_interval_months=36),
    ]

    planned = plan_schedule(protocols, date_of_birth=dob, today=TODAY)

    by_name = {p.vaccine_name: p.due_date for p in planned}
    assert by_name == {"Rabies": date(2025, 6, 15), "DHPP Booster": date(2027, 6, 15)}


def test_adult_protocol_without_booster_due_today():
    dob = date(2022, 1, 1)
    protocols = [protocol("Leptospirosis", 52, is_core=False)]

    planned = plan_schedule(protocols, date_of_birth=dob, today=TODAY)

    assert planned[0].due_date == TODAY


def test_adult_protocol_not_yet_reached_uses_birth_offset():
    dob = TODAY - timedelta(weeks=60)
    protocols = [protocol("Senior Panel", 70, booster_interval_months=12)]

    planned = plan_schedule(protocols, date_of_birth=dob, today=TODAY)

    assert planned[0].due_date == dob + timedelta(weeks=70)


def test_boundary_at_exactly_52_weeks_is_adult():
    dob = TODAY - timedelta(weeks=52)
    protocols = [protocol("DHPP", 6), protocol("DHPP Booster", 52, booster_interval_months=36)]

    planned = plan_schedule(protocols, date_of_birth=dob, today=TODAY)

    assert [p.vaccine_name for p in planned] == ["DHPP Booster"]


def test_booster_month_arithmetic_clamps_to_month_end():
    today = date(2024, 1, 31)
    protocols = [protocol("Rabies", 12, booster_interval_months=1)]

    planned = plan_schedule(protocols, date_of_birth=date(2019, 5, 5), today=today)

    assert planned[0].due_date == date(2024, 2, 29)


def test_protocol_id_is_carried_to_plan():
    p = protocol("DHPP", 6)
    planned = plan_schedule([p], date_of_birth=TODAY, today=TODAY)
    assert planned[0].protocol_id == p.id
