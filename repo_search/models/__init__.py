"""SQLAlchemy models."""

from repo_search.models.session import UserSession
from repo_search.models.user import User

__all__ = [
    "User",
    "UserSession",
]
