"""Pizza ORM — the aggregate clients create, mutate and delete.

Invariants:
    - id is integer primary key; uniqueness enforced by the storage layer
    - sauce_id, when set, references an existing sauces row
    - toppings is an ordered list, always initialized (empty for a new pizza)
    - Deleting a pizza deletes its pizza_toppings links, never the toppings

Design Decisions:
    - PizzaTopping link row with its own surrogate key instead of a bare
      secondary table: preserves insertion order and allows the same topping
      to appear twice (repeated add-topping calls are not deduplicated)
    - toppings exposed through association_proxy so callers append Topping
      objects directly
    - lazy="selectin" on every relationship: async sessions cannot lazy-load
      on attribute access, so refresh() and get() load the full graph
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.ext.associationproxy import AssociationProxy, association_proxy
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pizza_api.db.base import Base
from pizza_api.models.sauce import Sauce
from pizza_api.models.topping import Topping


class PizzaTopping(Base):
    """One topping reference on a pizza, ordered by id."""
    __tablename__ = "pizza_toppings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pizza_id: Mapped[int] = mapped_column(
        ForeignKey("pizzas.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    topping_id: Mapped[int] = mapped_column(
        ForeignKey("toppings.id"), nullable=False,
    )

    topping: Mapped[Topping] = relationship(Topping, lazy="selectin")


class Pizza(Base):
    """Pizza entity — owns its topping links and points at one sauce."""
    __tablename__ = "pizzas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    sauce_id: Mapped[int | None] = mapped_column(
        ForeignKey("sauces.id"), nullable=True,
    )

    # Relationships
    sauce: Mapped[Sauce | None] = relationship(Sauce, lazy="selectin")
    topping_links: Mapped[list[PizzaTopping]] = relationship(
        PizzaTopping,
        cascade="all, delete-orphan",
        order_by=PizzaTopping.id,
        lazy="selectin",
    )

    toppings: AssociationProxy[list[Topping]] = association_proxy(
        "topping_links", "topping",
        creator=lambda topping: PizzaTopping(topping=topping),
    )

    def __repr__(self) -> str:
        return f"Pizza(id={self.id!r}, name={self.name!r})"
