"""Service test fixtures — FastAPI test client bound to the test database.

Invariants:
    - get_db dependency overridden: one fresh session per request, like production
    - db_manager module singleton swapped for the readiness probe, restored after
"""

import pytest
from httpx import ASGITransport, AsyncClient

import pizza_api.infrastructure.database as db_module
from pizza_api.infrastructure.database import get_db
from pizza_api.main import app
from pizza_api.services.pizza_service import PizzaService


@pytest.fixture
def service(test_db):
    return PizzaService(test_db)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with db_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
