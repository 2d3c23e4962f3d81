from __future__ import annotations

from datetime import date, timedelta
from uuid import UUID, uuid4

import pytest

from src.infrastructure.db.orm.vaccine_schedule import PetVaccineScheduleORM
from src.utils.dates import add_months, add_weeks


async def insert_entry(app, pet: dict, *, vaccine_name: str, due_date: date, status="pending"):
    entry_id = uuid4()
    async with app.state.session_factory() as session:
        session.add(
            PetVaccineScheduleORM(
                id=entry_id,
                pet_id=UUID(pet["id"]),
                owner_id=UUID(pet["owner_id"]),
                vaccine_name=vaccine_name,
                due_date=due_date,
                status=status,
            )
        )
        await session.commit()
    return entry_id


@pytest.mark.asyncio
async def test_generate_for_adult_dog_uses_boosters(client, auth_headers, create_pet, dog_protocols):
    pet = await create_pet(auth_headers)
    today = date.today()

    response = await client.post(
        f"/api/v1/pets/{pet['id']}/vaccine-schedule/generate", headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    due = {entry["vaccine_name"]: entry["due_date"] for entry in body["created"]}
    assert due == {
        "Rabies": add_months(today, 12).isoformat(),
        "DHPP Booster": add_months(today, 36).isoformat(),
    }
    assert {entry["status"] for entry in body["created"]} == {"pending"}


@pytest.mark.asyncio
async def test_generate_for_puppy_uses_series(client, auth_headers, create_pet, dog_protocols):
    dob = date.today() - timedelta(weeks=10)
    pet = await create_pet(auth_headers, date_of_birth=dob.isoformat())

    response = await client.post(
        f"/api/v1/pets/{pet['id']}/vaccine-schedule/generate", headers=auth_headers
    )

    due = {entry["vaccine_name"]: entry["due_date"] for entry in response.json()["created"]}
    assert due == {
        "DHPP": date.today().isoformat(),
        "Rabies": add_weeks(dob, 12).isoformat(),
    }

    listed = await client.get(f"/api/v1/pets/{pet['id']}/vaccine-schedule", headers=auth_headers)
    assert [entry["vaccine_name"] for entry in listed.json()] == ["DHPP", "Rabies"]


@pytest.mark.asyncio
async def test_generate_without_protocols_reports_failure(client, auth_headers, create_pet):
    pet = await create_pet(auth_headers, name="Misu", species="Cat")

    response = await client.post(
        f"/api/v1/pets/{pet['id']}/vaccine-schedule/generate", headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "No vaccine protocols found for this species"
    assert body["created"] == []


@pytest.mark.asyncio
async def test_generate_skip_if_existing(client, auth_headers, create_pet, dog_protocols):
    pet = await create_pet(auth_headers)
    url = f"/api/v1/pets/{pet['id']}/vaccine-schedule/generate"
    await client.post(url, headers=auth_headers)

    again = await client.post(url, json={"skip_if_existing": True}, headers=auth_headers)

    assert again.json() == {"success": True, "error": None, "created": []}
    listed = await client.get(f"/api/v1/pets/{pet['id']}/vaccine-schedule", headers=auth_headers)
    assert len(listed.json()) == 2


@pytest.mark.asyncio
async def test_generate_for_other_owners_pet(client, auth_headers, other_headers, create_pet):
    pet = await create_pet(auth_headers)
    response = await client.post(
        f"/api/v1/pets/{pet['id']}/vaccine-schedule/generate", headers=other_headers
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_past_due_pending_reads_as_overdue(app, client, auth_headers, create_pet):
    pet = await create_pet(auth_headers)
    yesterday = date.today() - timedelta(days=1)
    await insert_entry(app, pet, vaccine_name="Rabies", due_date=yesterday)

    listed = await client.get(f"/api/v1/pets/{pet['id']}/vaccine-schedule", headers=auth_headers)

    (entry,) = listed.json()
    assert entry["status"] == "overdue"


@pytest.mark.asyncio
async def test_complete_then_skip_is_rejected(app, client, auth_headers, create_pet):
    pet = await create_pet(auth_headers)
    entry_id = await insert_entry(
        app, pet, vaccine_name="Rabies", due_date=date.today() - timedelta(days=3)
    )

    completed = await client.post(
        f"/api/v1/vaccine-schedule/{entry_id}/complete",
        json={"completed_date": date.today().isoformat(), "notes": "Given at clinic"},
        headers=auth_headers,
    )
    assert completed.status_code == 200
    body = completed.json()
    assert body["status"] == "completed"
    assert body["completed_date"] == date.today().isoformat()
    assert body["notes"] == "Given at clinic"

    skipped = await client.post(
        f"/api/v1/vaccine-schedule/{entry_id}/skip", json={"reason": "late"}, headers=auth_headers
    )
    assert skipped.status_code == 409
    assert skipped.json()["code"] == "invalid_transition"


@pytest.mark.asyncio
async def test_skip_records_reason(app, client, auth_headers, other_headers, create_pet):
    pet = await create_pet(auth_headers)
    entry_id = await insert_entry(
        app, pet, vaccine_name="Leptospirosis", due_date=date.today() + timedelta(days=5)
    )

    foreign = await client.post(
        f"/api/v1/vaccine-schedule/{entry_id}/skip", json={}, headers=other_headers
    )
    assert foreign.status_code == 404

    skipped = await client.post(
        f"/api/v1/vaccine-schedule/{entry_id}/skip",
        json={"reason": "Vet advised against it"},
        headers=auth_headers,
    )
    assert skipped.status_code == 200
    assert skipped.json()["status"] == "skipped"
    assert skipped.json()["notes"] == "Vet advised against it"
    assert skipped.json()["completed_date"] is None


@pytest.mark.asyncio
async def test_upcoming_spans_owner_pets(app, client, auth_headers, other_headers, create_pet):
    rex = await create_pet(auth_headers)
    luna = await create_pet(auth_headers, name="Luna", species="Cat")
    stranger = await create_pet(other_headers, name="Max")
    today = date.today()
    await insert_entry(app, rex, vaccine_name="Rabies", due_date=today - timedelta(days=2))
    await insert_entry(app, luna, vaccine_name="FVRCP", due_date=today + timedelta(days=10))
    await insert_entry(app, luna, vaccine_name="FeLV", due_date=today + timedelta(days=90))
    await insert_entry(
        app, rex, vaccine_name="DHPP", due_date=today + timedelta(days=3), status="completed"
    )
    await insert_entry(app, stranger, vaccine_name="Rabies", due_date=today + timedelta(days=1))

    response = await client.get("/api/v1/vaccine-schedule/upcoming", headers=auth_headers)

    assert response.status_code == 200
    items = response.json()
    assert [(item["pet_name"], item["vaccine_name"], item["status"]) for item in items] == [
        ("Rex", "Rabies", "overdue"),
        ("Luna", "FVRCP", "pending"),
    ]
    assert items[1]["species"] == "Cat"

    wide = await client.get(
        "/api/v1/vaccine-schedule/upcoming", params={"days": 120}, headers=auth_headers
    )
    assert len(wide.json()) == 3

    invalid = await client.get(
        "/api/v1/vaccine-schedule/upcoming", params={"days": 0}, headers=auth_headers
    )
    assert invalid.status_code == 422
