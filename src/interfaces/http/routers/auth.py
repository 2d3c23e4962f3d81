from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.use_cases.auth import get_me, login_user, register_account
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import (
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from src.interfaces.http.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    SelfRegisterRequest,
    SelfRegisterResponse,
)

router = APIRouter(prefix="", tags=["auth"])


@router.get("/me", response_model=MeResponse)
async def read_me(context: AuthContext = Depends(get_auth_context)) -> MeResponse:
    result = await get_me.execute(
        user_id=context.user_id,
        email=context.email,
        claims=context.claims,
    )
    return MeResponse(user_id=result.user_id, email=result.email, claims=result.claims)


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    return LoginResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        user_id=result.user_id,
        email=result.email,
    )


@router.post("/auth/register", response_model=SelfRegisterResponse, status_code=201)
async def register_endpoint(
    payload: SelfRegisterRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> SelfRegisterResponse:
    result = await register_account.execute(
        uow=uow,
        payload=register_account.SelfRegisterInput(
            email=payload.email,
            password=payload.password,
            full_name=payload.full_name,
        ),
        password_hasher=password_hasher,
    )
    return SelfRegisterResponse(user_id=result.user_id, email=result.email)
