"""Pytest configuration and fixtures."""

import os
from datetime import timedelta

# Point the application at the test database before it builds its engine
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from account_api.api.dependencies import get_clock, get_notifier  # noqa: E402
from account_api.database import Base, get_db  # noqa: E402
from account_api.main import app  # noqa: E402
from account_api.services.auth_service import AuthService  # noqa: E402
from account_api.services.user_store import UserStore  # noqa: E402

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

START_MS = 1_760_000_000_000


class FakeNotifier:
    """Records outgoing mail instead of sending it."""

    def __init__(self):
        self.sent: list[dict] = []
        self.fail = False

    def send(self, to: str, subject: str, body: str) -> bool:
        if self.fail:
            return False
        self.sent.append({"to": to, "subject": subject, "body": body})
        return True


class FakeClock:
    """Manually advanced epoch-millisecond clock."""

    def __init__(self, now: int = START_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += int(timedelta(**kwargs).total_seconds() * 1000)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
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
def notifier():
    return FakeNotifier()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(db, notifier, clock):
    """Auth service over the test session, fake mail and a fixed clock."""
    return AuthService(UserStore(db), notifier, clock)


@pytest.fixture(scope="function")
def client(db, notifier, clock):
    """Create a test client with database, mail and clock overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register Ann; the client keeps her session cookie."""
    credentials = {"name": "Ann", "email": "ann@x.com", "password": "pw1"}
    response = client.post("/api/auth/register", json=credentials)
    assert response.json()["success"] is True
    return credentials
