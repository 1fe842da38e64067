"""ORM Models — SQLAlchemy declarative models for pizzas, toppings and sauces.

Invariants:
    - All models inherit from Base (db/base.py)
    - Pizza is the aggregate root; toppings and sauces are shared references

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table before
      create_all runs
"""

from pizza_api.models.topping import Topping  # noqa: F401
from pizza_api.models.sauce import Sauce  # noqa: F401
from pizza_api.models.pizza import Pizza, PizzaTopping  # noqa: F401
