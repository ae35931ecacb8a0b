"""Persistence for login sessions."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from repo_search.exceptions import StorageError
from repo_search.models.session import UserSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Create and look up bearer sessions."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, user_id: int, token: str, expires_at: int) -> UserSession:
        """Insert a session row and return it as stored."""
        session = UserSession(user_id=user_id, token=token, expires_at=expires_at)
        self.db.add(session)
        try:
            self.db.commit()
            self.db.refresh(session)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create session for user {user_id}: {e}")
            raise StorageError("Unable to create user session") from e

        if session.id is None:
            raise StorageError("Unable to create user session")
        return session

    def find_valid_by_token(self, token: str, now: int) -> UserSession | None:
        """Get the session for ``token`` if it expires after ``now``.

        Expired and unknown tokens both return None.
        """
        try:
            return (
                self.db.query(UserSession)
                .filter(UserSession.token == token, UserSession.expires_at > now)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up session: {e}")
            raise StorageError() from e
