"""FastAPI dependencies for authentication, database and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.openapi.models import HTTPBearer as HTTPBearerModel
from fastapi.security.base import SecurityBase
from sqlalchemy.orm import Session

from repo_search.config import get_settings
from repo_search.database import get_db
from repo_search.services.auth import AuthService, RequestContext
from repo_search.services.hashing import PasswordHasher
from repo_search.services.search import SearchService


class AuthorizationHeader(SecurityBase):
    """Documents the bearer scheme but returns the raw Authorization header.

    The "Bearer" prefix is checked case-sensitively by AuthService.verify,
    which HTTPBearer would not do.
    """

    def __init__(self) -> None:
        self.model = HTTPBearerModel()
        self.scheme_name = "bearerAuth"

    async def __call__(self, request: Request) -> str | None:
        return request.headers.get("Authorization")


authorization_header = AuthorizationHeader()


def get_password_hasher() -> PasswordHasher:
    """Get a hasher salted with the configured secret."""
    return PasswordHasher(get_settings().salt_token)


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, hasher)


def get_search_service() -> SearchService:
    """Get search service instance."""
    return SearchService()


def require_session(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> RequestContext:
    """Verify the bearer token and return the request context.

    FastAPI caches dependencies per request, so a router-level guard and a
    handler parameter share one verification.
    """
    return auth_service.verify(authorization)
