"""Pizza Routes — REST endpoints over PizzaService.

Invariants:
    - Routes never touch the session directly; every call goes through PizzaService
    - Missing pizza on GET → 404 ResourceNotFoundError
    - Missing pizza/topping/sauce on PUT → 404 ReferencedEntityNotFoundError
      (raised by the service, rendered by the global handler)
    - DELETE is idempotent: 204 whether or not the pizza existed

Design Decisions:
    - Topping and sauce ids travel in the path: PUT is idempotent per URL for
      sauce; for toppings each PUT appends another reference
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from pizza_api.core.errors import ResourceNotFoundError
from pizza_api.infrastructure.database import get_db
from pizza_api.models import Pizza, Sauce, Topping
from pizza_api.schemas.pizza import PizzaCreate, PizzaDetail, PizzaSummary
from pizza_api.services.pizza_service import PizzaService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/pizzas", tags=["pizzas"])


def get_pizza_service(db: AsyncSession = Depends(get_db)) -> PizzaService:
    return PizzaService(db)


@router.get("", response_model=list[PizzaSummary])
async def list_pizzas(service: PizzaService = Depends(get_pizza_service)):
    """List every pizza (id and name only)."""
    pizzas = await service.get_all()
    return [PizzaSummary(id=p.id, name=p.name) for p in pizzas]


@router.get("/{pizza_id}", response_model=PizzaDetail)
async def get_pizza(
    pizza_id: int, service: PizzaService = Depends(get_pizza_service),
):
    """Get one pizza with toppings and sauce."""
    pizza = await service.get_by_id(pizza_id)
    if pizza is None:
        raise ResourceNotFoundError("Pizza", pizza_id)
    return PizzaDetail.from_pizza(pizza)


@router.post(
    "", response_model=PizzaDetail, status_code=status.HTTP_201_CREATED,
)
async def create_pizza(
    body: PizzaCreate,
    response: Response,
    service: PizzaService = Depends(get_pizza_service),
):
    """Create a pizza; nested toppings and sauce are inserted as new rows."""
    pizza = Pizza(name=body.name)
    for topping in body.toppings:
        pizza.toppings.append(Topping(name=topping.name))
    if body.sauce is not None:
        pizza.sauce = Sauce(name=body.sauce.name)

    created = await service.create(pizza)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return PizzaDetail.from_pizza(created)


@router.put(
    "/{pizza_id}/toppings/{topping_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def add_topping(
    pizza_id: int, topping_id: int,
    service: PizzaService = Depends(get_pizza_service),
):
    """Append an existing topping to the pizza."""
    await service.add_topping(pizza_id, topping_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{pizza_id}/sauce/{sauce_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def update_sauce(
    pizza_id: int, sauce_id: int,
    service: PizzaService = Depends(get_pizza_service),
):
    """Replace the pizza's sauce with an existing one."""
    await service.update_sauce(pizza_id, sauce_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{pizza_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pizza(
    pizza_id: int, service: PizzaService = Depends(get_pizza_service),
):
    """Delete the pizza if it exists."""
    await service.delete_by_id(pizza_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
