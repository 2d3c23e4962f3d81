from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError, NotFound
from src.application.interfaces.repositories.vaccine_schedules import VaccineScheduleRepository
from src.domain.models.vaccine_schedule import PetVaccineSchedule
from src.domain.value_objects.schedule_status import ScheduleStatus
from src.infrastructure.db.orm.vaccine_schedule import PetVaccineScheduleORM


class VaccineSchedulesSQLAlchemyRepository(VaccineScheduleRepository):
    """Returns entries with their stored status; callers apply the overdue projection."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PetVaccineScheduleORM) -> PetVaccineSchedule:
        return PetVaccineSchedule(
            id=orm.id,
            pet_id=orm.pet_id,
            owner_id=orm.owner_id,
            protocol_id=orm.protocol_id,
            vaccine_name=orm.vaccine_name,
            due_date=orm.due_date,
            status=orm.status,
            completed_date=orm.completed_date,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    def _to_orm(self, entry: PetVaccineSchedule) -> PetVaccineScheduleORM:
        return PetVaccineScheduleORM(
            id=entry.id,
            pet_id=entry.pet_id,
            owner_id=entry.owner_id,
            protocol_id=entry.protocol_id,
            vaccine_name=entry.vaccine_name,
            due_date=entry.due_date,
            status=entry.status,
            completed_date=entry.completed_date,
            notes=entry.notes,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )

    async def add_many(self, entries: list[PetVaccineSchedule]) -> list[PetVaccineSchedule]:
        orms = [self._to_orm(entry) for entry in entries]
        self.session.add_all(orms)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise InfrastructureError(f"Failed to store schedule entries: {exc}") from exc
        return [self._to_domain(orm) for orm in orms]

    async def get(self, owner_id: UUID, schedule_id: UUID) -> PetVaccineSchedule | None:
        stmt = (
            select(PetVaccineScheduleORM)
            .where(PetVaccineScheduleORM.owner_id == owner_id)
            .where(PetVaccineScheduleORM.id == schedule_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_by_pet(self, pet_id: UUID) -> list[PetVaccineSchedule]:
        stmt = (
            select(PetVaccineScheduleORM)
            .where(PetVaccineScheduleORM.pet_id == pet_id)
            .order_by(PetVaccineScheduleORM.due_date.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_pet(self, pet_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(PetVaccineScheduleORM)
            .where(PetVaccineScheduleORM.pet_id == pet_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def list_open_due_before(
        self, owner_id: UUID, until: date
    ) -> list[PetVaccineSchedule]:
        """Stored pending/overdue entries due on or before ``until``, across all pets."""
        stmt = (
            select(PetVaccineScheduleORM)
            .where(PetVaccineScheduleORM.owner_id == owner_id)
            .where(
                PetVaccineScheduleORM.status.in_(
                    [ScheduleStatus.PENDING.value, ScheduleStatus.OVERDUE.value]
                )
            )
            .where(PetVaccineScheduleORM.due_date <= until)
            .order_by(PetVaccineScheduleORM.due_date.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, entry: PetVaccineSchedule) -> PetVaccineSchedule:
        orm = await self.session.get(PetVaccineScheduleORM, entry.id)
        if not orm:
            raise NotFound("Schedule entry not found")

        orm.status = entry.status
        orm.completed_date = entry.completed_date
        orm.notes = entry.notes
        orm.updated_at = entry.updated_at

        await self.session.flush()
        return self._to_domain(orm)

    async def delete_for_pet(self, owner_id: UUID, pet_id: UUID) -> int:
        stmt = (
            delete(PetVaccineScheduleORM)
            .where(PetVaccineScheduleORM.owner_id == owner_id)
            .where(PetVaccineScheduleORM.pet_id == pet_id)
        )
        result = await self.session.execute(stmt)
        return int(result.rowcount or 0)
