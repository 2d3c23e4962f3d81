from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.errors import InfrastructureError
from src.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.users = None
        self.pets = None
        self.vaccinations = None
        self.vaccine_protocols = None
        self.vaccine_schedules = None
        self.timeline = None
        self.notification_preferences = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.notification_preferences_sqlalchemy import (
            NotificationPreferencesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.pets_sqlalchemy import PetsSQLAlchemyRepository
        from src.infrastructure.repos.timeline_sqlalchemy import TimelineSQLAlchemyRepository
        from src.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository
        from src.infrastructure.repos.vaccinations_sqlalchemy import (
            VaccinationsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.vaccine_protocols_sqlalchemy import (
            VaccineProtocolsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.vaccine_schedules_sqlalchemy import (
            VaccineSchedulesSQLAlchemyRepository,
        )

        self.users = UsersSQLAlchemyRepository(self.session)
        self.pets = PetsSQLAlchemyRepository(self.session)
        self.vaccinations = VaccinationsSQLAlchemyRepository(self.session)
        self.vaccine_protocols = VaccineProtocolsSQLAlchemyRepository(self.session)
        self.vaccine_schedules = VaccineSchedulesSQLAlchemyRepository(self.session)
        self.timeline = TimelineSQLAlchemyRepository(self.session)
        self.notification_preferences = NotificationPreferencesSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.users = None
            self.pets = None
            self.vaccinations = None
            self.vaccine_protocols = None
            self.vaccine_schedules = None
            self.timeline = None
            self.notification_preferences = None

    async def commit(self) -> None:
        if not self.session:
            return
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise InfrastructureError(f"Failed to commit transaction: {exc}") from exc

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
