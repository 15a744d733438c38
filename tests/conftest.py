"""Pytest configuration and fixtures.

The app runs against in-memory fakes (tests/fakes.py) placed on
app.state.firebase, the same slot the lifespan fills in production.
ASGITransport does not run the lifespan, so no Google API is contacted.
"""

import os

# Before app.main is imported: settings and the limiter read env at import.
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ.pop("FIREBASE_SERVICE_ACCOUNT_KEY", None)
os.environ.pop("FIREBASE_SERVICE_ACCOUNT_PATH", None)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.main import app  # noqa: E402
from tests.fakes import FakeAuth, FakeClients, FakeFirestoreClient, FakeStorage  # noqa: E402

ADMIN_UID = "admin-uid"
USER_UID = "user-uid"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    yield
    get_settings.cache_clear()


@pytest.fixture
def firestore() -> FakeFirestoreClient:
    return FakeFirestoreClient()


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def auth() -> FakeAuth:
    fake = FakeAuth()
    fake.add_user("admin@example.com", uid=ADMIN_UID, claims={"admin": True})
    fake.add_user("user@example.com", uid=USER_UID)
    return fake


@pytest.fixture
def clients(firestore, storage, auth) -> FakeClients:
    return FakeClients(firestore=firestore, auth=auth, storage=storage)


@pytest.fixture
async def client(clients) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with fake Firebase clients."""
    app.state.firebase = clients
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.state.firebase = None


@pytest.fixture
def admin_headers(auth) -> dict[str, str]:
    token = auth.issue_token(ADMIN_UID, admin=True, email="admin@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(auth) -> dict[str, str]:
    token = auth.issue_token(USER_UID, email="user@example.com")
    return {"Authorization": f"Bearer {token}"}
