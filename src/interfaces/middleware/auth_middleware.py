from __future__ import annotations

from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext, fetch_user
from src.interfaces.middleware.error_handler import error_payload

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/api/v1/auth/login",
    "/api/v1/auth/register",
    "/api/v1/emergency/",  # QR emergency profile, reachable without an account
    "/docs",
    "/openapi.json",
    "/redoc",
)


def bearer_token(request: Request) -> str:
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise AuthError("Missing Authorization header")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Invalid Authorization header")
    return token.strip()


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolves the calling owner for every non-public request.

    The resulting ``AuthContext`` is stored on ``request.state`` and every
    owner-scoped query downstream filters on its ``owner_id``.
    """

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            request.state.auth_context = await self._authenticate(request)
        except AuthError as exc:
            return JSONResponse(status_code=exc.status_code, content=error_payload(exc))
        return await call_next(request)

    async def _authenticate(self, request: Request) -> AuthContext:
        token = bearer_token(request)
        jwt_service = getattr(request.app.state, "jwt_service", None)
        session_factory = getattr(request.app.state, "session_factory", None)
        if jwt_service is None or session_factory is None:
            raise RuntimeError("Auth dependencies not configured")

        claims = jwt_service.decode(token)
        owner_id = jwt_service.owner_id_from(claims)
        async with session_factory() as session:
            owner = await fetch_user(session, owner_id)
        if owner is None or not owner.is_active:
            raise AuthError("Inactive or missing user")
        return AuthContext(user_id=owner_id, email=owner.email, claims=claims)
