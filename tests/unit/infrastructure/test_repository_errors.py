from __future__ import annotations

from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

from src.application.errors import InfrastructureError
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.infrastructure.repos.vaccine_protocols_sqlalchemy import (
    VaccineProtocolsSQLAlchemyRepository,
)


def connection_reset() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("connection reset"))


async def test_protocol_lookup_wraps_datastore_errors():
    async def execute(stmt):
        raise connection_reset()

    repo = VaccineProtocolsSQLAlchemyRepository(SimpleNamespace(execute=execute))

    with pytest.raises(InfrastructureError) as excinfo:
        await repo.list_for_species("dog")
    assert excinfo.value.message.startswith("Failed to load vaccine protocols")


async def test_unit_of_work_commit_wraps_datastore_errors():
    async def commit():
        raise connection_reset()

    uow = SQLAlchemyUnitOfWork(session_factory=lambda: None)
    uow.session = SimpleNamespace(commit=commit)

    with pytest.raises(InfrastructureError) as excinfo:
        await uow.commit()
    assert excinfo.value.message.startswith("Failed to commit transaction")
