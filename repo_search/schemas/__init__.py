"""Pydantic schemas for API requests and responses."""

from repo_search.schemas.auth import (
    LoginResponse,
    RegisterResponse,
    SessionResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from repo_search.schemas.search import RepositoryResponse, SearchResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "SessionResponse",
    "RegisterResponse",
    "LoginResponse",
    "RepositoryResponse",
    "SearchResponse",
]
