"""Topping ORM — independently persisted topping referenced by pizzas.

Invariants:
    - id is integer primary key (autoincrement)
    - name is non-nullable
    - Referenced (not owned) by zero or more pizzas through pizza_toppings
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pizza_api.db.base import Base


class Topping(Base):
    """Topping entity — a named ingredient that pizzas point at."""
    __tablename__ = "toppings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"Topping(id={self.id!r}, name={self.name!r})"
