"""Sauce ORM — independently persisted sauce referenced by pizzas."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pizza_api.db.base import Base


class Sauce(Base):
    """Sauce entity — at most one per pizza, shared across many pizzas."""
    __tablename__ = "sauces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"Sauce(id={self.id!r}, name={self.name!r})"
