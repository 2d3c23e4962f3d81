from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.user import User
from src.infrastructure.db.orm.user import UserORM


@dataclass(slots=True)
class AuthContext:
    """The authenticated owner; every owned query is scoped by ``user_id``."""

    user_id: UUID
    email: str
    claims: dict[str, Any]

    @property
    def owner_id(self) -> UUID:
        return self.user_id


async def fetch_user(session: AsyncSession, user_id: UUID) -> User | None:
    stmt = select(UserORM).where(UserORM.id == user_id)
    result = await session.execute(stmt)
    row = result.scalar_one_or_none()
    if row is None:
        return None
    return User(
        id=row.id,
        email=row.email,
        hashed_password=row.hashed_password,
        full_name=row.full_name,
        is_active=row.is_active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
