from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import jwt
from jose.exceptions import JWTError

from src.application.errors import AuthError

ACCESS_TOKEN_TYPE = "access"


class JWTService:
    """Issues and verifies the owner access tokens sent as ``Authorization: Bearer``."""

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str,
        access_token_expires_minutes: int,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expires_minutes = access_token_expires_minutes
        self.issuer = issuer
        self.audience = audience

    def create_access_token(self, *, subject: UUID, email: str | None = None) -> str:
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + timedelta(minutes=self.access_token_expires_minutes)
        claims: dict[str, Any] = {
            "sub": str(subject),
            "typ": ACCESS_TOKEN_TYPE,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        if email:
            claims["email"] = email
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc
        if claims.get("typ") != ACCESS_TOKEN_TYPE:
            raise AuthError("Not an access token")
        return claims

    @staticmethod
    def owner_id_from(claims: dict[str, Any]) -> UUID:
        subject = claims.get("sub")
        if not subject:
            raise AuthError("Token missing subject")
        try:
            return UUID(str(subject))
        except ValueError as exc:
            raise AuthError("Token subject is not a valid UUID") from exc
