"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from repo_search.api.dependencies import get_auth_service
from repo_search.schemas.auth import (
    ErrorResponse,
    LoginResponse,
    LoginResult,
    RegisterResponse,
    RegisterResult,
    SessionResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from repo_search.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Register user",
)
async def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user = auth_service.register(user_data.name, user_data.email, user_data.password)
    return RegisterResponse(result=RegisterResult(user=UserResponse.model_validate(user)))


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Login user",
)
async def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password, returning a new session token."""
    session = auth_service.login(credentials.email, credentials.password)
    return LoginResponse(result=LoginResult(session=SessionResponse.model_validate(session)))
