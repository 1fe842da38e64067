"""Bootstrap — ensure schema exists and seed a fresh database.

Invariants:
    - Idempotent: seeding is skipped when any pizza row already exists
    - Seed rows are written in one transaction (all or nothing)

Design Decisions:
    - Called explicitly from the lifespan before requests are served,
      not triggered as a side effect of importing the app
"""

import logging

from sqlalchemy import select

from pizza_api.infrastructure.database import DatabaseSessionManager
from pizza_api.models import Pizza, Sauce, Topping

logger = logging.getLogger(__name__)


def build_seed_pizzas() -> list[Pizza]:
    """Starter menu: three pizzas sharing five toppings and two sauces."""
    pepperoni = Topping(name="Pepperoni")
    sausage = Topping(name="Sausage")
    ham = Topping(name="Ham")
    chicken = Topping(name="Chicken")
    pineapple = Topping(name="Pineapple")

    tomato = Sauce(name="Tomato")
    alfredo = Sauce(name="Alfredo")

    return [
        Pizza(
            name="Meat Lovers", sauce=tomato,
            toppings=[pepperoni, sausage, ham, chicken],
        ),
        Pizza(name="Hawaiian", sauce=tomato, toppings=[pineapple, ham]),
        Pizza(name="Alfredo Chicken", sauce=alfredo, toppings=[chicken]),
    ]


async def create_db_if_not_exists(
    manager: DatabaseSessionManager, seed: bool = True,
) -> bool:
    """Create tables, then seed them if the pizza table is empty.

    Returns True when seed rows were inserted.
    """
    await manager.create_schema()
    if not seed:
        return False

    async with manager.session() as db:
        result = await db.execute(select(Pizza.id).limit(1))
        if result.first() is not None:
            logger.info("Database already seeded, skipping")
            return False

        pizzas = build_seed_pizzas()
        db.add_all(pizzas)
        await db.commit()
        logger.info(f"Seeded database with {len(pizzas)} pizzas")
        return True
