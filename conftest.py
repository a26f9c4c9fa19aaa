import pytest
from httpx import ASGITransport, AsyncClient

from booking_engine.main import app
from booking_engine.core.security import ApiKeyGate
from booking_engine.db.session import DatabaseStatus, check_database


TEST_API_KEY = "s3cret-Key"


@pytest.fixture(autouse=True)
def open_gate_and_healthy_db():
    """Every test starts in open mode with a reachable database."""
    original_gate = app.state.api_key_gate
    app.state.api_key_gate = ApiKeyGate("")

    async def _db_up():
        return DatabaseStatus(ok=True)

    app.dependency_overrides[check_database] = _db_up
    yield
    app.dependency_overrides.clear()
    app.state.api_key_gate = original_gate


@pytest.fixture
def api_key():
    """Enforce TEST_API_KEY on the /api routes"""
    app.state.api_key_gate = ApiKeyGate(TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def db_down():
    message = "connection refused: could not connect to server"

    async def _db_down():
        return DatabaseStatus(ok=False, error=message)

    app.dependency_overrides[check_database] = _db_down
    return message


@pytest.fixture
async def test_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def test_client_with_auth(api_key):
    class AuthenticatedClient:
        def __init__(self, client, token):
            self.client = client
            self.headers = {"Authorization": f"Bearer {token}"}

        async def get(self, url, **kwargs):
            kwargs.setdefault("headers", {}).update(self.headers)
            return await self.client.get(url, **kwargs)

        async def post(self, url, **kwargs):
            kwargs.setdefault("headers", {}).update(self.headers)
            return await self.client.post(url, **kwargs)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield AuthenticatedClient(client, api_key)


@pytest.fixture
def valid_quote_data():
    return {
        "tenant": "all-limos",
        "booking_type": "airport",
        "route": {"pickup": "SYD T1", "dropoff": "Circular Quay"},
        "pax": 3,
        "vehicle": "suv",
        "hints": {"distance_km": 18.5},
    }


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "auth: marks tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "health: marks tests related to the health probe"
    )
