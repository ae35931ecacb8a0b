"""User model."""

from sqlalchemy import Column, Integer, String

from repo_search.database import Base


class User(Base):
    """Registered user. Rows are never updated after creation."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    # Stored in the "password" column; always a PasswordHasher digest
    password_hash = Column("password", String(64), nullable=False)
