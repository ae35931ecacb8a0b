"""Pytest configuration and fixtures."""

import os


def make_test_database_url(url: str | None) -> str:
    """Derive a test-only database URL so cleanup never touches a configured database.

    PostgreSQL URLs get a "_test" suffix on the database name; anything else
    falls back to a local SQLite file.
    """
    if not url or not url.startswith("postgresql"):
        return "sqlite:///./test.db"
    base, _, query = url.partition("?")
    prefix, _, name = base.rpartition("/")
    if not name.endswith("_test"):
        name = f"{name}_test"
    return f"{prefix}/{name}?{query}" if query else f"{prefix}/{name}"


# Settings are read once at import time, so configure them before importing the app
os.environ["DATABASE_URL"] = make_test_database_url(os.getenv("DATABASE_URL"))
os.environ.setdefault("SALT_TOKEN", "test-salt-token")

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from repo_search.api.dependencies import get_search_service  # noqa: E402
from repo_search.database import Base, get_db  # noqa: E402
from repo_search.main import app  # noqa: E402
from repo_search.services.search import SearchService  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "testpass123"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores the logged-in user's details."""

    def __init__(self, *args, email: str, token: str, expires_at: int, **kwargs):
        super().__init__(*args, **kwargs)
        self.email = email
        self.token = token
        self.expires_at = expires_at


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def upstream():
    """Stub for the GitHub search API.

    Tests set ``upstream.response`` to the httpx.Response to return; every
    request received is appended to ``upstream.requests``.
    """

    class Upstream:
        def __init__(self):
            self.requests: list[httpx.Request] = []
            self.response = httpx.Response(200, json={"items": []})

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self.response

    return Upstream()


@pytest.fixture(scope="function")
def client(db, upstream):
    """Create a test client with database and upstream overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    def override_get_search_service():
        return SearchService(transport=httpx.MockTransport(upstream.handler))

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_search_service] = override_get_search_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Register and log in a user, returning bearer headers."""
    email = "test@example.com"
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": TEST_PASSWORD, "name": "Test User"},
    )
    assert response.status_code == 200

    response = client.post("/api/auth/login", json={"email": email, "password": TEST_PASSWORD})
    assert response.status_code == 200
    session = response.json()["result"]["session"]

    return AuthHeaders(
        {"Authorization": f"Bearer {session['token']}"},
        email=email,
        token=session["token"],
        expires_at=session["expires_at"],
    )
