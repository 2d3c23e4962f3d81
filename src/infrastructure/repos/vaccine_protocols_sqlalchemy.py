from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError
from src.application.interfaces.repositories.vaccine_protocols import VaccineProtocolRepository
from src.domain.models.vaccine_protocol import VaccineProtocol
from src.infrastructure.db.orm.vaccine_protocol import VaccineProtocolORM


class VaccineProtocolsSQLAlchemyRepository(VaccineProtocolRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VaccineProtocolORM) -> VaccineProtocol:
        return VaccineProtocol(
            id=orm.id,
            species=orm.species,
            vaccine_name=orm.vaccine_name,
            is_core=orm.is_core,
            min_age_weeks=orm.min_age_weeks,
            max_age_weeks=orm.max_age_weeks,
            dose_number=orm.dose_number,
            interval_weeks=orm.interval_weeks,
            booster_interval_months=orm.booster_interval_months,
            description=orm.description,
        )

    async def list_for_species(self, species: str) -> list[VaccineProtocol]:
        stmt = (
            select(VaccineProtocolORM)
            .where(VaccineProtocolORM.species == species.lower())
            .order_by(VaccineProtocolORM.min_age_weeks.asc(), VaccineProtocolORM.dose_number)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise InfrastructureError(f"Failed to load vaccine protocols: {exc}") from exc
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def add_many(self, protocols: list[VaccineProtocol]) -> None:
        self.session.add_all(
            [
                VaccineProtocolORM(
                    id=p.id,
                    species=p.species.lower(),
                    vaccine_name=p.vaccine_name,
                    is_core=p.is_core,
                    min_age_weeks=p.min_age_weeks,
                    max_age_weeks=p.max_age_weeks,
                    dose_number=p.dose_number,
                    interval_weeks=p.interval_weeks,
                    booster_interval_months=p.booster_interval_months,
                    description=p.description,
                )
                for p in protocols
            ]
        )
        await self.session.flush()
