"""Persistence for user records."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from repo_search.exceptions import DuplicateEmailError, StorageError
from repo_search.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Create and look up users."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, email: str, name: str, password_hash: str) -> User:
        """Insert a user.

        Uniqueness of ``email`` is enforced by the database constraint, so
        concurrent registrations of the same address lose with
        DuplicateEmailError rather than creating two rows.

        Raises:
            DuplicateEmailError: The email is already registered
            StorageError: Any other database failure
        """
        user = User(email=email, name=name, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEmailError() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create user: {e}")
            raise StorageError() from e
        self.db.refresh(user)
        return user

    def find_by_credentials(self, email: str, password_hash: str) -> User | None:
        """Get the user matching both email and password hash exactly."""
        try:
            return (
                self.db.query(User)
                .filter(User.email == email, User.password_hash == password_hash)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up user: {e}")
            raise StorageError() from e
