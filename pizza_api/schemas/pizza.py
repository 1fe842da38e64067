"""Pizza Schemas — JSON request/response shapes mirroring the entity model.

Invariants:
    - Field types only; no length/range constraints (the database is the
      only judge of a malformed pizza)
    - PizzaDetail.toppings is always a list, sauce is null when unset

Design Decisions:
    - from_attributes=True: responses are built straight from ORM rows
    - Nested toppings/sauce on create are new rows, inserted with the pizza
"""

from pydantic import BaseModel, ConfigDict, Field


class ToppingIn(BaseModel):
    name: str


class SauceIn(BaseModel):
    name: str


class PizzaCreate(BaseModel):
    """Create payload — name plus optional new toppings and sauce."""
    name: str | None = None
    toppings: list[ToppingIn] = Field(default_factory=list)
    sauce: SauceIn | None = None


class ToppingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class SauceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class PizzaSummary(BaseModel):
    """List item — identity and name only."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class PizzaDetail(BaseModel):
    """Single pizza with its toppings in order and its sauce."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    toppings: list[ToppingOut] = Field(default_factory=list)
    sauce: SauceOut | None = None

    @classmethod
    def from_pizza(cls, pizza) -> "PizzaDetail":
        """Build from an ORM Pizza whose toppings and sauce are loaded."""
        return cls(
            id=pizza.id,
            name=pizza.name,
            toppings=[ToppingOut.model_validate(t) for t in pizza.toppings],
            sauce=SauceOut.model_validate(pizza.sauce) if pizza.sauce else None,
        )
