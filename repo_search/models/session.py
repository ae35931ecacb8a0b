"""User session model."""

from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String

from repo_search.database import Base


class UserSession(Base):
    """Bearer session issued at login.

    ``expires_at`` is milliseconds since the epoch. Expired rows are kept and
    simply stop matching lookups.
    """

    __tablename__ = "users_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    token = Column(String(64), unique=True, nullable=False, index=True)
    expires_at = Column(BigInteger, nullable=False)
