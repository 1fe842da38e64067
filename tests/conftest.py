"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Tests never touch the on-disk ContosoPizza.db

Design Decisions:
    - Real DatabaseSessionManager over a bare engine: tests run with the
      same FK pragma and rollback mapping as production
    - SQLite in-memory via aiosqlite shares one connection (StaticPool), so
      the test session and request sessions see the same data
"""

import os

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from pizza_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from pizza_api.models import Sauce, Topping  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
async def catalog(db_manager):
    """Two toppings and two sauces, committed; returns their ids by name."""
    async with db_manager.session() as db:
        rows = [
            Topping(name="Pepperoni"),
            Topping(name="Mushroom"),
            Sauce(name="Tomato"),
            Sauce(name="Alfredo"),
        ]
        db.add_all(rows)
        await db.commit()
        return {row.name: row.id for row in rows}
