from __future__ import annotations

from datetime import date

import pytest

from src.application.use_cases.notifications.send_test_message import TEST_MESSAGE


@pytest.mark.asyncio
async def test_emergency_profile_is_public(client, auth_headers, create_pet):
    pet = await create_pet(auth_headers, known_allergies="Penicillin", blood_group="DEA 1.1+")
    await client.post(
        f"/api/v1/pets/{pet['id']}/vaccinations",
        json={"vaccine_name": "Rabies", "date_given": date.today().isoformat()},
        headers=auth_headers,
    )

    response = await client.get(f"/api/v1/emergency/{pet['unique_pet_id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["pet"]["name"] == "Rex"
    assert body["pet"]["known_allergies"] == "Penicillin"
    assert "owner_id" not in body["pet"]
    assert body["last_vaccination"]["vaccine_name"] == "Rabies"
    assert [event["title"] for event in body["timeline"]] == ["Rabies Vaccination"]


@pytest.mark.asyncio
async def test_emergency_profile_unknown_pet(client):
    response = await client.get("/api/v1/emergency/PET-1-UNKNOWN")
    assert response.status_code == 404
    assert response.json()["code"] == "not_found"


@pytest.mark.asyncio
async def test_notification_preferences_roundtrip(client, auth_headers):
    defaults = await client.get("/api/v1/notifications/preferences", headers=auth_headers)
    assert defaults.status_code == 200
    assert defaults.json() == {
        "whatsapp_number": None,
        "whatsapp_enabled": False,
        "email_enabled": True,
    }

    saved = await client.put(
        "/api/v1/notifications/preferences",
        json={"whatsapp_number": "+593991234567", "whatsapp_enabled": True, "email_enabled": False},
        headers=auth_headers,
    )
    assert saved.status_code == 200

    reread = await client.get("/api/v1/notifications/preferences", headers=auth_headers)
    assert reread.json()["whatsapp_number"] == "+593991234567"
    assert reread.json()["email_enabled"] is False


@pytest.mark.asyncio
async def test_enabling_whatsapp_requires_number(client, auth_headers):
    response = await client.put(
        "/api/v1/notifications/preferences",
        json={"whatsapp_enabled": True},
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_send_test_message_uses_saved_number(client, auth_headers, messaging):
    await client.put(
        "/api/v1/notifications/preferences",
        json={"whatsapp_number": "+593991234567", "whatsapp_enabled": True},
        headers=auth_headers,
    )

    response = await client.post("/api/v1/notifications/test", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "sid": "SM0001"}
    (sent,) = messaging.sent
    assert sent.to == "+593991234567"
    assert sent.body == TEST_MESSAGE


@pytest.mark.asyncio
async def test_send_test_message_without_number(client, auth_headers, messaging):
    response = await client.post("/api/v1/notifications/test", json={}, headers=auth_headers)
    assert response.status_code == 422
    assert messaging.sent == []
