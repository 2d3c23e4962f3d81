from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.use_cases.health_risk import assess_health_risk
from src.application.use_cases.pets import (
    create_pet,
    delete_pet,
    get_emergency_profile,
    upload_pet_photo,
)
from src.application.use_cases.vaccinations import create_vaccination
from src.domain.models.pet import Pet
from src.domain.models.vaccination import Vaccination
from src.domain.value_objects.risk_level import RiskLevel

TODAY = date(2024, 6, 15)


class StubPets:
    def __init__(self, pets=None) -> None:
        self.pets = {pet.id: pet for pet in (pets or [])}
        self.deleted: list = []

    async def add(self, pet):
        self.pets[pet.id] = pet
        return pet

    async def get(self, owner_id, pet_id):
        pet = self.pets.get(pet_id)
        return pet if pet and pet.owner_id == owner_id else None

    async def get_by_unique_pet_id(self, unique_pet_id):
        return next((p for p in self.pets.values() if p.unique_pet_id == unique_pet_id), None)

    async def update(self, pet):
        self.pets[pet.id] = pet
        return pet

    async def delete(self, owner_id, pet_id):
        self.deleted.append(pet_id)
        return self.pets.pop(pet_id, None) is not None


class RecordingDeletes:
    def __init__(self, name: str, log: list) -> None:
        self.name = name
        self.log = log

    async def delete_for_pet(self, owner_id, pet_id):
        self.log.append(self.name)
        return 1


def make_uow(pets: StubPets, **repos):
    calls = {"commit": 0}

    async def commit():
        calls["commit"] += 1

    async def rollback():
        return None

    return SimpleNamespace(pets=pets, commit=commit, rollback=rollback, calls=calls, **repos)


def make_pet(owner_id=None, **kwargs) -> Pet:
    return Pet.create(
        owner_id=owner_id or uuid4(),
        name=kwargs.pop("name", "Rex"),
        species=kwargs.pop("species", "Dog"),
        date_of_birth=kwargs.pop("date_of_birth", date(2016, 1, 10)),
        **kwargs,
    )


async def test_create_pet_normalizes_and_generates_identifier():
    pets = StubPets()
    uow = make_uow(pets)

    created = await create_pet.execute(
        uow,
        uuid4(),
        create_pet.CreatePetInput(
            name="  Luna ",
            species="cat",
            date_of_birth=date(2022, 2, 2),
            breed="",
            vet_email="",
        ),
        today=TODAY,
    )

    assert created.name == "Luna"
    assert created.species == "Cat"
    assert created.breed is None
    assert created.vet_email is None
    assert created.unique_pet_id.startswith("PET-")
    assert uow.calls["commit"] == 1


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "   "},
        {"name": "x" * 51},
        {"species": "Ferret"},
        {"date_of_birth": TODAY + timedelta(days=1)},
        {"weight_kg": Decimal("0")},
        {"weight_kg": Decimal("200.5")},
    ],
)
async def test_create_pet_rejects_invalid_input(overrides):
    payload = {"name": "Rex", "species": "Dog", "date_of_birth": date(2020, 1, 1)}
    payload.update(overrides)
    uow = make_uow(StubPets())

    with pytest.raises(ValidationError):
        await create_pet.execute(uow, uuid4(), create_pet.CreatePetInput(**payload), today=TODAY)
    assert uow.calls["commit"] == 0


async def test_delete_pet_removes_dependents_before_pet():
    owner_id = uuid4()
    pet = make_pet(owner_id)
    log: list[str] = []
    pets = StubPets([pet])
    uow = make_uow(
        pets,
        vaccinations=RecordingDeletes("vaccinations", log),
        vaccine_schedules=RecordingDeletes("vaccine_schedules", log),
        timeline=RecordingDeletes("timeline", log),
    )

    await delete_pet.execute(uow, owner_id, pet.id)

    assert log == ["vaccinations", "vaccine_schedules", "timeline"]
    assert pets.deleted == [pet.id]
    assert uow.calls["commit"] == 1


async def test_delete_pet_of_other_owner_is_not_found():
    pet = make_pet()
    uow = make_uow(StubPets([pet]))

    with pytest.raises(NotFound):
        await delete_pet.execute(uow, uuid4(), pet.id)


async def test_vaccination_also_records_timeline_event():
    owner_id = uuid4()
    pet = make_pet(owner_id)
    added: dict[str, list] = {"vaccinations": [], "timeline": []}

    async def add_vaccination(v):
        added["vaccinations"].append(v)
        return v

    async def add_event(e):
        added["timeline"].append(e)
        return e

    uow = make_uow(
        StubPets([pet]),
        vaccinations=SimpleNamespace(add=add_vaccination),
        timeline=SimpleNamespace(add=add_event),
    )

    await create_vaccination.execute(
        uow,
        owner_id,
        pet.id,
        create_vaccination.CreateVaccinationInput(
            vaccine_name=" Rabies ", date_given=TODAY, vet_name="Dr. Vega", notes="left leg"
        ),
        today=TODAY,
    )

    event = added["timeline"][0]
    assert added["vaccinations"][0].vaccine_name == "Rabies"
    assert event.event_type == "vaccination"
    assert event.title == "Rabies Vaccination"
    assert event.event_date == TODAY
    assert event.description == "left leg"
    assert event.metadata == {"vet_name": "Dr. Vega"}


async def test_vaccination_in_future_is_rejected():
    uow = make_uow(StubPets())
    with pytest.raises(ValidationError):
        await create_vaccination.execute(
            uow,
            uuid4(),
            uuid4(),
            create_vaccination.CreateVaccinationInput(
                vaccine_name="Rabies", date_given=TODAY + timedelta(days=1)
            ),
            today=TODAY,
        )


async def test_assess_health_risk_scores_loaded_history():
    owner_id = uuid4()
    pet = make_pet(owner_id, date_of_birth=date(2016, 1, 10))
    rabies = Vaccination.create(
        pet_id=pet.id,
        owner_id=owner_id,
        vaccine_name="Rabies",
        date_given=date(2023, 3, 17),
        next_due_date=TODAY - timedelta(days=90),
    )

    async def list_by_pet(pet_id):
        return [rabies] if pet_id == pet.id else []

    uow = make_uow(StubPets([pet]), vaccinations=SimpleNamespace(list_by_pet=list_by_pet))

    assessment = await assess_health_risk.execute(uow, owner_id, pet.id, today=TODAY)

    assert assessment.result.score == 6
    assert assessment.result.level is RiskLevel.HIGH
    assert assessment.label == "High Risk"


async def test_emergency_profile_limits_timeline():
    pet = make_pet()
    requested: dict = {}

    async def latest_for_pet(pet_id):
        return None

    async def list_by_pet(pet_id, *, limit=None):
        requested["limit"] = limit
        return []

    uow = make_uow(
        StubPets([pet]),
        vaccinations=SimpleNamespace(latest_for_pet=latest_for_pet),
        timeline=SimpleNamespace(list_by_pet=list_by_pet),
    )

    profile = await get_emergency_profile.execute(uow, pet.unique_pet_id.lower())

    assert profile.pet.id == pet.id
    assert requested["limit"] == 10


async def test_emergency_profile_unknown_id():
    uow = make_uow(StubPets())
    with pytest.raises(NotFound):
        await get_emergency_profile.execute(uow, "PET-0-NOPE")


class MemoryStorage:
    def __init__(self) -> None:
        self.keys: list[str] = []

    async def put_object(self, key, data, content_type):
        self.keys.append(key)

    async def get_public_url(self, key):
        return f"https://cdn.test/{key}"


async def test_photo_upload_stores_under_owner_prefix():
    owner_id = uuid4()
    pet = make_pet(owner_id)
    storage = MemoryStorage()
    uow = make_uow(StubPets([pet]))

    updated = await upload_pet_photo.execute(
        uow,
        storage,
        owner_id,
        pet.id,
        upload_pet_photo.UploadPhotoInput(filename="rex.PNG", content_type="image/png", data=b"x"),
    )

    key = storage.keys[0]
    assert key.startswith(f"pets/{owner_id}/") and key.endswith(".png")
    assert updated.photo_url == f"https://cdn.test/{key}"


async def test_photo_upload_rejects_non_images():
    owner_id = uuid4()
    pet = make_pet(owner_id)
    uow = make_uow(StubPets([pet]))

    with pytest.raises(ValidationError):
        await upload_pet_photo.execute(
            uow,
            MemoryStorage(),
            owner_id,
            pet.id,
            upload_pet_photo.UploadPhotoInput(
                filename="notes.txt", content_type="text/plain", data=b"x"
            ),
        )
