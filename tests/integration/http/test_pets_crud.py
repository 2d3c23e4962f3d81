from __future__ import annotations

from datetime import date, timedelta

import pytest
from sqlalchemy import func, select

from src.infrastructure.db.orm.timeline_event import HealthTimelineEventORM
from src.infrastructure.db.orm.vaccination import VaccinationORM


@pytest.mark.asyncio
async def test_create_list_get_update_pet(client, auth_headers, create_pet):
    pet = await create_pet(auth_headers, vet_email="")
    assert pet["unique_pet_id"].startswith("PET-")
    assert pet["vet_email"] is None
    assert pet["is_indoor"] is True

    listed = await client.get("/api/v1/pets", headers=auth_headers)
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()] == [pet["id"]]

    fetched = await client.get(f"/api/v1/pets/{pet['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["breed"] == "Beagle"

    updated = await client.put(
        f"/api/v1/pets/{pet['id']}",
        json={"weight_kg": "13.2", "known_allergies": "Chicken", "breed": ""},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    body = updated.json()
    assert body["known_allergies"] == "Chicken"
    assert body["breed"] is None
    assert body["name"] == "Rex"
    assert body["unique_pet_id"] == pet["unique_pet_id"]


@pytest.mark.asyncio
async def test_create_pet_validation(client, auth_headers):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    future = await client.post(
        "/api/v1/pets",
        json={"name": "Rex", "species": "Dog", "date_of_birth": tomorrow},
        headers=auth_headers,
    )
    assert future.status_code == 422

    ferret = await client.post(
        "/api/v1/pets",
        json={"name": "Slinky", "species": "Ferret", "date_of_birth": "2020-01-01"},
        headers=auth_headers,
    )
    assert ferret.status_code == 422
    assert ferret.json()["code"] == "validation_error"


@pytest.mark.asyncio
async def test_pets_are_scoped_to_owner(client, auth_headers, other_headers, create_pet):
    pet = await create_pet(auth_headers)

    assert (await client.get("/api/v1/pets", headers=other_headers)).json() == []
    foreign = await client.get(f"/api/v1/pets/{pet['id']}", headers=other_headers)
    assert foreign.status_code == 404
    delete = await client.delete(f"/api/v1/pets/{pet['id']}", headers=other_headers)
    assert delete.status_code == 404


@pytest.mark.asyncio
async def test_delete_pet_removes_history(app, client, auth_headers, create_pet):
    pet = await create_pet(auth_headers)
    created = await client.post(
        f"/api/v1/pets/{pet['id']}/vaccinations",
        json={"vaccine_name": "Rabies", "date_given": date.today().isoformat()},
        headers=auth_headers,
    )
    assert created.status_code == 201

    response = await client.delete(f"/api/v1/pets/{pet['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert (await client.get(f"/api/v1/pets/{pet['id']}", headers=auth_headers)).status_code == 404

    async with app.state.session_factory() as session:
        vaccinations = await session.scalar(select(func.count()).select_from(VaccinationORM))
        events = await session.scalar(select(func.count()).select_from(HealthTimelineEventORM))
    assert vaccinations == 0
    assert events == 0


@pytest.mark.asyncio
async def test_upload_photo(client, auth_headers, create_pet, storage):
    pet = await create_pet(auth_headers)
    response = await client.post(
        f"/api/v1/pets/{pet['id']}/photo",
        files={"file": ("rex.jpg", b"\xff\xd8\xff\xe0fake", "image/jpeg")},
        headers=auth_headers,
    )
    assert response.status_code == 200
    (key,) = storage.objects
    assert key.startswith(f"pets/{pet['owner_id']}/") and key.endswith(".jpg")
    assert response.json()["photo_url"] == f"https://cdn.test/{key}"


@pytest.mark.asyncio
async def test_upload_photo_rejects_documents(client, auth_headers, create_pet, storage):
    pet = await create_pet(auth_headers)
    response = await client.post(
        f"/api/v1/pets/{pet['id']}/photo",
        files={"file": ("records.pdf", b"%PDF-1.4", "application/pdf")},
        headers=auth_headers,
    )
    assert response.status_code == 422
    assert storage.objects == {}


@pytest.mark.asyncio
async def test_emergency_link(client, auth_headers, create_pet):
    pet = await create_pet(auth_headers)
    response = await client.get(f"/api/v1/pets/{pet['id']}/emergency-link", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "unique_pet_id": pet["unique_pet_id"],
        "url": f"https://pets.test/emergency/{pet['unique_pet_id']}",
    }
