from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.repositories.pets import PetRepository
from src.domain.models.pet import Pet
from src.infrastructure.db.orm.pet import PetORM

# Columns owners may change after creation; unique_pet_id and owner_id are fixed
_MUTABLE_FIELDS = (
    "name",
    "species",
    "breed",
    "date_of_birth",
    "weight_kg",
    "is_indoor",
    "blood_group",
    "known_allergies",
    "chronic_conditions",
    "photo_url",
    "emergency_contact_name",
    "emergency_contact_phone",
    "vet_name",
    "vet_phone",
    "vet_email",
    "updated_at",
)


class PetsSQLAlchemyRepository(PetRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PetORM) -> Pet:
        return Pet(
            id=orm.id,
            owner_id=orm.owner_id,
            name=orm.name,
            species=orm.species,
            date_of_birth=orm.date_of_birth,
            unique_pet_id=orm.unique_pet_id,
            breed=orm.breed,
            weight_kg=orm.weight_kg,
            is_indoor=orm.is_indoor,
            blood_group=orm.blood_group,
            known_allergies=orm.known_allergies,
            chronic_conditions=orm.chronic_conditions,
            photo_url=orm.photo_url,
            emergency_contact_name=orm.emergency_contact_name,
            emergency_contact_phone=orm.emergency_contact_phone,
            vet_name=orm.vet_name,
            vet_phone=orm.vet_phone,
            vet_email=orm.vet_email,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, pet: Pet) -> Pet:
        orm = PetORM(
            id=pet.id,
            owner_id=pet.owner_id,
            unique_pet_id=pet.unique_pet_id,
            created_at=pet.created_at,
            **{name: getattr(pet, name) for name in _MUTABLE_FIELDS},
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Pet identifier already exists") from exc
        return self._to_domain(orm)

    async def get(self, owner_id: UUID, pet_id: UUID) -> Pet | None:
        stmt = select(PetORM).where(PetORM.owner_id == owner_id).where(PetORM.id == pet_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_unique_pet_id(self, unique_pet_id: str) -> Pet | None:
        # Public lookup: intentionally not scoped by owner
        stmt = select(PetORM).where(PetORM.unique_pet_id == unique_pet_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_for_owner(self, owner_id: UUID) -> list[Pet]:
        stmt = (
            select(PetORM)
            .where(PetORM.owner_id == owner_id)
            .order_by(PetORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, pet: Pet) -> Pet:
        orm = await self.session.get(PetORM, pet.id)
        if not orm or orm.owner_id != pet.owner_id:
            raise NotFound("Pet not found")
        for name in _MUTABLE_FIELDS:
            setattr(orm, name, getattr(pet, name))
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, owner_id: UUID, pet_id: UUID) -> bool:
        stmt = delete(PetORM).where(PetORM.owner_id == owner_id).where(PetORM.id == pet_id)
        result = await self.session.execute(stmt)
        return bool(result.rowcount)
