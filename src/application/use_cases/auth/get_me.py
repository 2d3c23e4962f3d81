from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID


@dataclass(slots=True)
class MeResult:
    user_id: UUID
    email: str
    claims: dict[str, Any]


async def execute(*, user_id: UUID, email: str, claims: dict[str, Any]) -> MeResult:
    return MeResult(user_id=user_id, email=email, claims=claims)
