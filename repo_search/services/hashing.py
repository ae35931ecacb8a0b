"""Salted SHA-256 digests for passwords and session tokens."""

import hashlib


class PasswordHasher:
    """Hash values with a single server-wide salt.

    The output is deterministic so stored hashes can be compared by equality.
    """

    def __init__(self, salt: str) -> None:
        self._salt = salt

    def hash(self, password: str) -> str:
        """Return the lowercase hex SHA-256 of ``"{salt}:{password}"``."""
        return hashlib.sha256(f"{self._salt}:{password}".encode()).hexdigest()
