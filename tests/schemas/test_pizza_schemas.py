"""Pizza schemas — create payload defaults and detail rendering."""

from pizza_api.models import Pizza, Sauce, Topping
from pizza_api.schemas.pizza import PizzaCreate, PizzaDetail


def test_create_payload_defaults():
    body = PizzaCreate.model_validate({"name": "Margherita"})
    assert body.toppings == []
    assert body.sauce is None


def test_create_payload_has_no_length_rules():
    body = PizzaCreate.model_validate({"name": ""})
    assert body.name == ""


def test_detail_from_transient_pizza():
    pizza = Pizza(id=4, name="Hawaiian", sauce=Sauce(id=1, name="Tomato"))
    pizza.toppings.append(Topping(id=5, name="Pineapple"))
    pizza.toppings.append(Topping(id=3, name="Ham"))

    detail = PizzaDetail.from_pizza(pizza)

    assert detail.model_dump() == {
        "id": 4,
        "name": "Hawaiian",
        "toppings": [{"id": 5, "name": "Pineapple"}, {"id": 3, "name": "Ham"}],
        "sauce": {"id": 1, "name": "Tomato"},
    }
