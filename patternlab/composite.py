"""Prices of menu items composed from ingredients, grouped into orders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Price(ABC):
    """Anything that has a price."""

    @abstractmethod
    def total(self) -> float:
        """Return the price."""


class ConcretePrice(Price):
    """A leaf item with a fixed price."""

    def __init__(self, price: float) -> None:
        self.price = price

    def total(self) -> float:
        return self.price


class CommonFood(Price):
    """A composite whose price is the sum of its components."""

    def __init__(self) -> None:
        self._components: list[Price] = []

    @property
    def components(self) -> list[Price]:
        return list(self._components)

    def add_component(self, component: Price) -> None:
        self._components.append(component)

    def total(self) -> float:
        result = 0.0
        for component in self._components:
            result += component.total()
        return result


class SolidFood(CommonFood):
    pass


class Dish(CommonFood):
    pass


class Salad(CommonFood):
    pass


class ComplicatedDish(CommonFood):
    pass


class Meat(ConcretePrice):
    pass


class Bread(ConcretePrice):
    pass


class Drink(ConcretePrice):
    pass


class Juice(Drink):
    pass


class Coffee(Drink):
    pass


class Tea(Drink):
    pass


class Spice(ConcretePrice):
    pass


class Salt(Spice):
    pass


class Pepper(Spice):
    pass


class Vegetable(ConcretePrice):
    pass


class Cucumber(Vegetable):
    pass


class Tomato(Vegetable):
    pass


class Fruit(ConcretePrice):
    pass


class Banana(Fruit):
    pass


class Pineapple(Fruit):
    pass


@dataclass
class Order:
    """A list of priced items."""

    prices: list[Price] = field(default_factory=list)

    def add_price(self, price: Price) -> None:
        self.prices.append(price)

    def total(self) -> float:
        result = 0.0
        for price in self.prices:
            result += price.total()
        return result


class Catering:
    """A place that keeps copies of the orders it receives."""

    def __init__(self) -> None:
        self._orders: list[Order] = []

    def __len__(self) -> int:
        return len(self._orders)

    def add_order(self, order: Order) -> None:
        self._orders.append(Order(list(order.prices)))

    def first(self) -> Order:
        if not self._orders:
            raise IndexError("no orders")
        return self._orders[0]

    def last(self) -> Order:
        if not self._orders:
            raise IndexError("no orders")
        return self._orders[-1]


class Bar(Catering):
    pass


class Cafe(Catering):
    pass


class Restaurant(Catering):
    pass


def run() -> None:
    bar = Bar()
    order = Order()
    order.add_price(Coffee(88.0))

    meat_with_tomato_and_spices = SolidFood()
    meat_with_tomato_and_spices.add_component(Meat(256.0))
    meat_with_tomato_and_spices.add_component(Tomato(25.0))
    meat_with_tomato_and_spices.add_component(Salt(0.1))
    meat_with_tomato_and_spices.add_component(Pepper(0.1))
    order.add_price(meat_with_tomato_and_spices)

    bar.add_order(order)

    expected = 88.0 + 256.0 + 25.0 + 0.1 + 0.1
    print(
        "Coffee(88.0) + SolidFood(Meat(256.0) + Tomato(25.0) + Salt(0.1) + Pepper(0.1)) = "
        f"{expected:g}"
    )
    print(f"Composite result = {bar.last().total():g}")