from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.notification_preferences import (
    NotificationPreferenceRepository,
)
from src.application.interfaces.repositories.pets import PetRepository
from src.application.interfaces.repositories.timeline import TimelineRepository
from src.application.interfaces.repositories.users import UserRepository
from src.application.interfaces.repositories.vaccinations import VaccinationRepository
from src.application.interfaces.repositories.vaccine_protocols import VaccineProtocolRepository
from src.application.interfaces.repositories.vaccine_schedules import VaccineScheduleRepository


class UnitOfWork(Protocol):
    users: UserRepository
    pets: PetRepository
    vaccinations: VaccinationRepository
    vaccine_protocols: VaccineProtocolRepository
    vaccine_schedules: VaccineScheduleRepository
    timeline: TimelineRepository
    notification_preferences: NotificationPreferenceRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
