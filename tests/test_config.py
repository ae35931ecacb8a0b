"""Tests for settings validation and the test database guard."""

import pytest
from conftest import make_test_database_url
from pydantic import ValidationError

from repo_search.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_production_requires_salt(self):
        with pytest.raises(ValidationError, match="SALT_TOKEN"):
            Settings(
                environment="production",
                salt_token="change-me-in-production",  # noqa: S106
                database_url="postgresql://u:p@db/repo_search",
            )

    def test_production_rejects_localhost_database(self):
        with pytest.raises(ValidationError, match="DATABASE_URL"):
            Settings(
                environment="production",
                salt_token="real-secret",  # noqa: S106
                database_url="postgresql://u:p@localhost/repo_search",
            )

    def test_production_accepts_secure_settings(self):
        settings = Settings(
            environment="production",
            salt_token="real-secret",  # noqa: S106
            database_url="postgresql://u:p@db/repo_search",
        )
        assert settings.salt_token == "real-secret"  # noqa: S105


@pytest.mark.parametrize(
    ("configured", "expected"),
    [
        (None, "sqlite:///./test.db"),
        ("sqlite:///./repo_search.db", "sqlite:///./test.db"),
        (
            "postgresql://repo_search:pw@localhost:5432/repo_search",
            "postgresql://repo_search:pw@localhost:5432/repo_search_test",
        ),
        (
            "postgresql://u:p@db/repo_search?sslmode=require",
            "postgresql://u:p@db/repo_search_test?sslmode=require",
        ),
        ("postgresql://u:p@db/repo_search_test", "postgresql://u:p@db/repo_search_test"),
    ],
)
def test_tests_never_use_configured_database(configured, expected):
    """An exported DATABASE_URL is redirected to a separate test database."""
    assert make_test_database_url(configured) == expected
