from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

_BASE36 = string.digits + string.ascii_lowercase


def generate_unique_pet_id() -> str:
    """Public identifier embedded in the emergency QR link, e.g. PET-1718000000000-K3J9X2ABC."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"PET-{millis}-{suffix}".upper()


@dataclass(slots=True)
class Pet:
    id: UUID
    owner_id: UUID
    name: str
    species: str  # Species
    date_of_birth: date
    unique_pet_id: str
    breed: str | None = None
    weight_kg: Decimal | None = None
    is_indoor: bool = True
    blood_group: str | None = None
    known_allergies: str | None = None
    chronic_conditions: str | None = None
    photo_url: str | None = None

    # Contacts
    emergency_contact_name: str | None = None
    emergency_contact_phone: str | None = None
    vet_name: str | None = None
    vet_phone: str | None = None
    vet_email: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        name: str,
        species: str,
        date_of_birth: date,
        breed: str | None = None,
        weight_kg: Decimal | None = None,
        is_indoor: bool = True,
        blood_group: str | None = None,
        known_allergies: str | None = None,
        chronic_conditions: str | None = None,
        photo_url: str | None = None,
        emergency_contact_name: str | None = None,
        emergency_contact_phone: str | None = None,
        vet_name: str | None = None,
        vet_phone: str | None = None,
        vet_email: str | None = None,
    ) -> Pet:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            name=name,
            species=species,
            date_of_birth=date_of_birth,
            unique_pet_id=generate_unique_pet_id(),
            breed=breed,
            weight_kg=weight_kg,
            is_indoor=is_indoor,
            blood_group=blood_group,
            known_allergies=known_allergies,
            chronic_conditions=chronic_conditions,
            photo_url=photo_url,
            emergency_contact_name=emergency_contact_name,
            emergency_contact_phone=emergency_contact_phone,
            vet_name=vet_name,
            vet_phone=vet_phone,
            vet_email=vet_email,
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
