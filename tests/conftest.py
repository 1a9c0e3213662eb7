import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SIMULATED_LATENCY_MS"] = "0"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["DEBUG"] = "false"
os.environ["TIMEZONE"] = "UTC"
os.environ["REVIEW_LINK_BASE_URL"] = "https://example.com/review"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from quickcheck.api.deps import get_notification_transport
from quickcheck.db.base import Base
from quickcheck.db.models import Guest, User, UserRole
from quickcheck.db.session import SessionLocal, engine
from quickcheck.db.store import Store
from quickcheck.main import fastapi_app
from quickcheck.services.notification_service import NotificationTransport


class RecordingTransport(NotificationTransport):
    def __init__(self):
        self.sent = []

    def send(self, channel: str, recipient: str, body: str) -> None:
        self.sent.append((channel, recipient, body))


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return Store(db)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def users(store):
    base = datetime(2026, 1, 1, 8, 0)
    admin = store.insert(User(id="user_admin_01", name="Admin User", role=UserRole.admin, created_at=base))
    guard = store.insert(
        User(id="user_guard_01", name="Guard User", role=UserRole.guard, created_at=base + timedelta(seconds=1))
    )
    host = store.insert(User(id="user_host_01", name="Alice", role=UserRole.host, created_at=base + timedelta(seconds=2)))
    return {"admin": admin, "guard": guard, "host": host}


@pytest.fixture
def guest(store):
    return store.insert(
        Guest(
            id="guest_01",
            name="John Doe",
            id_number="G1234567X",
            phone="91234567",
            email="john.doe@example.com",
            consent=True,
        )
    )


@pytest.fixture
def client(transport):
    fastapi_app.dependency_overrides[get_notification_transport] = lambda: transport
    try:
        yield TestClient(fastapi_app)
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client, users):
    def _login(role: str) -> dict:
        response = client.post("/api/v1/auth/login", json={"role": role})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['data']['accessToken']}"}

    return _login
