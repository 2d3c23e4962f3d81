from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import date, timedelta
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    notification_preference,
    pet,
    timeline_event,
    user,
    vaccination,
    vaccine_protocol,
    vaccine_schedule,
)
from src.infrastructure.db.orm.user import UserORM
from src.infrastructure.db.orm.vaccine_protocol import VaccineProtocolORM
from src.infrastructure.messaging.models import MessagingService, OutboundMessage, SendResult
from src.interfaces.http.main import create_app


class RecordingMessagingService(MessagingService):
    def __init__(self) -> None:
        self.sent: list[OutboundMessage] = []

    async def send(self, message: OutboundMessage) -> SendResult:
        self.sent.append(message)
        return SendResult(success=True, sid=f"SM{len(self.sent):04d}")


class InMemoryStorageService:
    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def put_object(self, key: str, data: bytes, content_type: str) -> None:
        self.objects[key] = (data, content_type)

    async def get_public_url(self, key: str) -> str:
        return f"https://cdn.test/{key}"


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
            "public_base_url": "https://pets.test",
        }
    )


@pytest.fixture()
def messaging() -> RecordingMessagingService:
    return RecordingMessagingService()


@pytest.fixture()
def storage() -> InMemoryStorageService:
    return InMemoryStorageService()


@pytest.fixture()
def app(test_settings: Settings, messaging, storage):
    return create_app(settings=test_settings, messaging_service=messaging, storage_service=storage)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client


@pytest.fixture()
def make_owner(app, client) -> Callable[[str], Awaitable[dict[str, str]]]:
    """Insert an active user and return bearer headers for it."""

    async def _make(email: str) -> dict[str, str]:
        user_id = uuid4()
        async with app.state.session_factory() as session:
            session.add(
                UserORM(
                    id=user_id,
                    email=email,
                    hashed_password=app.state.password_hasher.hash("secret1"),
                    is_active=True,
                )
            )
            await session.commit()
        token = app.state.jwt_service.create_access_token(subject=user_id, email=email)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture()
async def auth_headers(make_owner) -> dict[str, str]:
    return await make_owner("owner@example.com")


@pytest.fixture()
async def other_headers(make_owner) -> dict[str, str]:
    return await make_owner("neighbour@example.com")


@pytest.fixture()
async def dog_protocols(app, client) -> dict[str, UUID]:
    """A small dog protocol table; cats deliberately have none."""
    rows = [
        VaccineProtocolORM(
            id=uuid4(), species="dog", vaccine_name="DHPP", is_core=True,
            min_age_weeks=6, max_age_weeks=20, dose_number=1, interval_weeks=4,
        ),
        VaccineProtocolORM(
            id=uuid4(), species="dog", vaccine_name="Rabies", is_core=True,
            min_age_weeks=12, dose_number=1, booster_interval_months=12,
        ),
        VaccineProtocolORM(
            id=uuid4(), species="dog", vaccine_name="DHPP Booster", is_core=True,
            min_age_weeks=52, dose_number=4, booster_interval_months=36,
        ),
    ]
    async with app.state.session_factory() as session:
        session.add_all(rows)
        await session.commit()
    return {row.vaccine_name: row.id for row in rows}


@pytest.fixture()
def create_pet(client) -> Callable[..., Awaitable[dict]]:
    async def _create(headers: dict[str, str], **overrides) -> dict:
        payload = {
            "name": "Rex",
            "species": "Dog",
            "date_of_birth": (date.today() - timedelta(days=3 * 365)).isoformat(),
            "breed": "Beagle",
            "weight_kg": "12.5",
        }
        payload.update(overrides)
        response = await client.post("/api/v1/pets", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
