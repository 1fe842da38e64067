"""Bootstrap — schema creation and idempotent seeding."""

from sqlalchemy import func, select

from pizza_api.infrastructure.database import DatabaseSessionManager
from pizza_api.infrastructure.seed import create_db_if_not_exists
from pizza_api.models import Pizza, Sauce, Topping
from pizza_api.services.pizza_service import PizzaService


async def _count(manager, model) -> int:
    async with manager.session() as db:
        result = await db.execute(select(func.count()).select_from(model))
        return result.scalar_one()


async def test_seeds_empty_database():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    try:
        assert await create_db_if_not_exists(manager) is True
        assert await _count(manager, Pizza) == 3
        assert await _count(manager, Topping) == 5
        assert await _count(manager, Sauce) == 2
    finally:
        await manager.dispose()


async def test_second_run_does_not_reseed():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    try:
        await create_db_if_not_exists(manager)
        assert await create_db_if_not_exists(manager) is False
        assert await _count(manager, Pizza) == 3
    finally:
        await manager.dispose()


async def test_seeded_pizzas_share_toppings_in_order():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    try:
        await create_db_if_not_exists(manager)
        async with manager.session() as db:
            service = PizzaService(db)
            meat_lovers = await service.get_by_id(1)
            assert meat_lovers.name == "Meat Lovers"
            assert meat_lovers.sauce.name == "Tomato"
            assert [t.name for t in meat_lovers.toppings] == [
                "Pepperoni", "Sausage", "Ham", "Chicken",
            ]
            hawaiian = await service.get_by_id(2)
            assert hawaiian.sauce.id == meat_lovers.sauce.id
    finally:
        await manager.dispose()


async def test_seed_disabled_only_creates_schema(db_manager):
    assert await create_db_if_not_exists(db_manager, seed=False) is False
    assert await _count(db_manager, Pizza) == 0
