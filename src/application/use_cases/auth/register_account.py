from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ConflictError, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.user import User
from src.infrastructure.auth.password import PasswordHasher

MIN_PASSWORD_LENGTH = 6


@dataclass(slots=True)
class SelfRegisterInput:
    email: str
    password: str
    full_name: str | None = None


@dataclass(slots=True)
class SelfRegisterResult:
    user_id: str
    email: str


async def execute(
    *, uow: UnitOfWork, payload: SelfRegisterInput, password_hasher: PasswordHasher
) -> SelfRegisterResult:
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    existing = await uow.users.get_by_email(payload.email.lower())
    if existing:
        raise ConflictError("Email already registered")
    hashed = password_hasher.hash(payload.password)
    user = User.create(
        email=payload.email,
        hashed_password=hashed,
        full_name=payload.full_name,
        is_active=True,
    )
    created = await uow.users.add(user)
    await uow.commit()
    return SelfRegisterResult(user_id=str(created.id), email=created.email)
