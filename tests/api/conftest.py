"""Route test fixtures: FastAPI app with an injected test pool + httpx client.

Invariants:
    - The app's lifespan never runs here (ASGITransport sends no lifespan events),
      so no PostgreSQL pool is ever built; the test pool is placed on app.state
    - raise_app_exceptions=False: the catch-all 500 handler is observable
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tests.fixtures import pool, test_engine  # noqa: F401
from users_api.config import Settings
from users_api.main import create_app


@pytest.fixture
def app(pool):  # noqa: F811
    application = create_app(Settings())
    application.state.pool = pool
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def create_user(client):
    """POST a user and return the response data."""
    async def _create(name="Ann", email="ann@x.com", age=30):
        res = await client.post(
            "/users", json={"name": name, "email": email, "age": age},
        )
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _create
