"""Pizza Service — the data-access façade the HTTP routes call.

Invariants:
    - One instance per request, wrapping that request's AsyncSession
    - Every write runs in _transaction(): commit on success, rollback and
      re-raise on failure, so a failed call leaves storage unchanged
    - A topping or sauce is linked only after both rows are found
    - get_by_id returns None for a missing id; more than one row for an id
      raises MultipleResultsFound
    - delete_by_id on a missing id is a no-op

Design Decisions:
    - get_all detaches its rows from the session: the list is read-only, and
      later lookups in the same session load fresh instances
    - add_topping never deduplicates: two calls produce two references
    - No validation on create: malformed rows fail in the database
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import raiseload, selectinload

from pizza_api.core.errors import ReferencedEntityNotFoundError
from pizza_api.models import Pizza, PizzaTopping, Sauce, Topping

logger = logging.getLogger(__name__)


class PizzaService:
    """List, fetch, create, re-top, re-sauce and delete pizzas."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[None]:
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def get_all(self) -> Sequence[Pizza]:
        """All pizzas ordered by id, without toppings or sauce."""
        result = await self.db.execute(
            select(Pizza).order_by(Pizza.id).options(raiseload("*")),
        )
        pizzas = result.scalars().all()
        for pizza in pizzas:
            self.db.expunge(pizza)
        return pizzas

    async def get_by_id(self, pizza_id: int) -> Pizza | None:
        """Pizza with toppings and sauce loaded, or None."""
        result = await self.db.execute(
            select(Pizza)
            .where(Pizza.id == pizza_id)
            .options(
                selectinload(Pizza.topping_links).selectinload(PizzaTopping.topping),
                selectinload(Pizza.sauce),
            ),
        )
        return result.scalar_one_or_none()

    async def create(self, new_pizza: Pizza) -> Pizza:
        """Insert the pizza (and any new nested toppings/sauce) and return it with its id."""
        async with self._transaction():
            self.db.add(new_pizza)
        await self.db.refresh(new_pizza)
        logger.info(
            f"Created pizza '{new_pizza.name}'",
            extra={"pizza_id": new_pizza.id},
        )
        return new_pizza

    async def add_topping(self, pizza_id: int, topping_id: int) -> None:
        """Append one reference to an existing topping."""
        async with self._transaction():
            pizza = await self.db.get(Pizza, pizza_id)
            topping = await self.db.get(Topping, topping_id)
            if pizza is None or topping is None:
                logger.warning(
                    "Add topping rejected: pizza or topping missing",
                    extra={"pizza_id": pizza_id, "topping_id": topping_id},
                )
                raise ReferencedEntityNotFoundError(
                    "Pizza or topping does not exist", pizza_id, topping_id,
                )
            pizza.toppings.append(topping)
        logger.info(
            f"Added topping '{topping.name}'",
            extra={"pizza_id": pizza_id, "topping_id": topping_id},
        )

    async def update_sauce(self, pizza_id: int, sauce_id: int) -> None:
        """Point the pizza at an existing sauce, replacing any previous one."""
        async with self._transaction():
            pizza = await self.db.get(Pizza, pizza_id)
            sauce = await self.db.get(Sauce, sauce_id)
            if pizza is None or sauce is None:
                logger.warning(
                    "Update sauce rejected: pizza or sauce missing",
                    extra={"pizza_id": pizza_id, "sauce_id": sauce_id},
                )
                raise ReferencedEntityNotFoundError(
                    "Pizza or sauce does not exist", pizza_id, sauce_id,
                )
            pizza.sauce = sauce
        logger.info(
            f"Set sauce '{sauce.name}'",
            extra={"pizza_id": pizza_id, "sauce_id": sauce_id},
        )

    async def delete_by_id(self, pizza_id: int) -> None:
        async with self._transaction():
            pizza = await self.db.get(Pizza, pizza_id)
            if pizza is None:
                return
            await self.db.delete(pizza)
        logger.info("Deleted pizza", extra={"pizza_id": pizza_id})
