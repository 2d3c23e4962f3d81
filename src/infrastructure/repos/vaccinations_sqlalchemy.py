from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import NotFound
from src.application.interfaces.repositories.vaccinations import VaccinationRepository
from src.domain.models.vaccination import Vaccination
from src.infrastructure.db.orm.vaccination import VaccinationORM


class VaccinationsSQLAlchemyRepository(VaccinationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VaccinationORM) -> Vaccination:
        return Vaccination(
            id=orm.id,
            pet_id=orm.pet_id,
            owner_id=orm.owner_id,
            vaccine_name=orm.vaccine_name,
            date_given=orm.date_given,
            next_due_date=orm.next_due_date,
            vet_name=orm.vet_name,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, vaccination: Vaccination) -> Vaccination:
        orm = VaccinationORM(
            id=vaccination.id,
            pet_id=vaccination.pet_id,
            owner_id=vaccination.owner_id,
            vaccine_name=vaccination.vaccine_name,
            date_given=vaccination.date_given,
            next_due_date=vaccination.next_due_date,
            vet_name=vaccination.vet_name,
            notes=vaccination.notes,
            created_at=vaccination.created_at,
            updated_at=vaccination.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, owner_id: UUID, vaccination_id: UUID) -> Vaccination | None:
        stmt = (
            select(VaccinationORM)
            .where(VaccinationORM.owner_id == owner_id)
            .where(VaccinationORM.id == vaccination_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_by_pet(self, pet_id: UUID) -> list[Vaccination]:
        stmt = (
            select(VaccinationORM)
            .where(VaccinationORM.pet_id == pet_id)
            .order_by(
                VaccinationORM.next_due_date.is_(None),
                VaccinationORM.next_due_date.asc(),
            )
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def latest_for_pet(self, pet_id: UUID) -> Vaccination | None:
        stmt = (
            select(VaccinationORM)
            .where(VaccinationORM.pet_id == pet_id)
            .order_by(VaccinationORM.date_given.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def update(self, vaccination: Vaccination) -> Vaccination:
        orm = await self.session.get(VaccinationORM, vaccination.id)
        if not orm:
            raise NotFound("Vaccination not found")

        orm.vaccine_name = vaccination.vaccine_name
        orm.date_given = vaccination.date_given
        orm.next_due_date = vaccination.next_due_date
        orm.vet_name = vaccination.vet_name
        orm.notes = vaccination.notes
        orm.updated_at = vaccination.updated_at

        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, owner_id: UUID, vaccination_id: UUID) -> bool:
        stmt = (
            delete(VaccinationORM)
            .where(VaccinationORM.owner_id == owner_id)
            .where(VaccinationORM.id == vaccination_id)
        )
        result = await self.session.execute(stmt)
        return bool(result.rowcount)

    async def delete_for_pet(self, owner_id: UUID, pet_id: UUID) -> int:
        stmt = (
            delete(VaccinationORM)
            .where(VaccinationORM.owner_id == owner_id)
            .where(VaccinationORM.pet_id == pet_id)
        )
        result = await self.session.execute(stmt)
        return int(result.rowcount or 0)
