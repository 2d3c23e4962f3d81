from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True)
class LoginResult:
    access_token: str
    token_type: str
    user_id: UUID
    email: str


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> LoginResult:
    """Exchange owner credentials for a bearer token.

    Unknown email, inactive account and wrong password all answer with the same
    error so the response does not reveal which accounts exist.
    """
    owner = await uow.users.get_by_email(payload.email.strip().lower())
    if owner is None or not owner.is_active:
        raise AuthError("Invalid credentials")
    if not password_hasher.verify(payload.password, owner.hashed_password):
        raise AuthError("Invalid credentials")

    logger.info("Owner logged in: %s", owner.id)
    return LoginResult(
        access_token=jwt_service.create_access_token(subject=owner.id, email=owner.email),
        token_type="bearer",
        user_id=owner.id,
        email=owner.email,
    )
