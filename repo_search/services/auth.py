"""Authentication service: registration, login and bearer verification."""

import logging
import secrets
import time
from dataclasses import dataclass

from sqlalchemy.orm import Session

from repo_search.exceptions import AuthenticationError, InvalidCredentialsError, InvalidInputError
from repo_search.models.session import UserSession
from repo_search.models.user import User
from repo_search.services.hashing import PasswordHasher
from repo_search.services.session_store import SessionStore
from repo_search.services.user_store import UserStore

logger = logging.getLogger(__name__)

SESSION_TTL_MS = 7 * 24 * 60 * 60 * 1000
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16


@dataclass(frozen=True)
class RequestContext:
    """Per-request values established by bearer verification."""

    user_id: int


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def get_bearer(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Only the first six characters are checked, case-sensitively.
    """
    if not authorization or authorization[:6] != "Bearer":
        return None
    return authorization[6:].strip() or None


class AuthService:
    """Orchestrates users and sessions. Holds no state between requests."""

    def __init__(
        self,
        db: Session,
        hasher: PasswordHasher,
        users: UserStore | None = None,
        sessions: SessionStore | None = None,
    ) -> None:
        self.hasher = hasher
        self.users = users or UserStore(db)
        self.sessions = sessions or SessionStore(db)

    def register(self, name: str, email: str, password: str) -> User:
        """Create a user.

        Raises:
            InvalidInputError: Password length outside 8-16 characters
            DuplicateEmailError: Email already registered
        """
        if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
            raise InvalidInputError(
                f"Password must be between {PASSWORD_MIN_LENGTH} and "
                f"{PASSWORD_MAX_LENGTH} characters"
            )

        user = self.users.create(email, name, self.hasher.hash(password))
        logger.info(f"Registered user {user.id}")
        return user

    def login(self, email: str, password: str) -> UserSession:
        """Issue a new session for matching credentials.

        Unknown email and wrong password raise the same InvalidCredentialsError.
        """
        user = self.users.find_by_credentials(email, self.hasher.hash(password))
        if user is None:
            logger.info("Login rejected: unknown user or wrong password")
            raise InvalidCredentialsError()

        expires_at = now_ms() + SESSION_TTL_MS
        token = self.hasher.hash(secrets.token_hex(32))
        session = self.sessions.create(user.id, token, expires_at)

        logger.info(f"Created session {session.id} for user {user.id}")
        return session

    def verify(self, authorization: str | None) -> RequestContext:
        """Resolve an Authorization header to the owning user.

        Raises:
            AuthenticationError: No bearer token, or no unexpired session for it
        """
        token = get_bearer(authorization)
        if token is None:
            raise AuthenticationError("No Authorization token received")

        session = self.sessions.find_valid_by_token(token, now_ms())
        if session is None:
            logger.info("Rejected unknown or expired session token")
            raise AuthenticationError()

        return RequestContext(user_id=session.user_id)
