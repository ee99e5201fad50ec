# src/patternbook/creational/builder.py
"""
Builder: separate the construction of a complex object from its
representation, so the same construction process can produce different
representations.

Instead of a constructor with many arguments, an intermediate builder defines
the product part by part and hands it over once every part is in place.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..enums import PatternCategory
from ..registry import register_pattern


class Pizza:
    """The product."""

    def __init__(self):
        self.dough = ""
        self.sauce = ""
        self.topping = ""

    def set_dough(self, dough: str):
        self.dough = dough

    def set_sauce(self, sauce: str):
        self.sauce = sauce

    def set_topping(self, topping: str):
        self.topping = topping

    def describe(self) -> str:
        return (f"Pizza with {self.dough} dough, {self.sauce} sauce and "
                f"{self.topping} topping. Mmm.")

    def print(self):
        print(self.describe())


class PizzaBuilder(ABC):
    """Abstract builder. Subclasses supply the parts, the order is fixed here."""

    def __init__(self):
        self._pizza: Optional[Pizza] = None

    def create_pizza(self) -> Pizza:
        self._pizza = Pizza()
        self.build_dough()
        self.build_sauce()
        self.build_topping()
        pizza, self._pizza = self._pizza, None
        return pizza

    @abstractmethod
    def build_dough(self):
        ...

    @abstractmethod
    def build_sauce(self):
        ...

    @abstractmethod
    def build_topping(self):
        ...


class HawaiianPizzaBuilder(PizzaBuilder):

    def build_dough(self):
        self._pizza.set_dough("cross")

    def build_sauce(self):
        self._pizza.set_sauce("mild")

    def build_topping(self):
        self._pizza.set_topping("ham+pineapple")


class SpicyPizzaBuilder(PizzaBuilder):

    def build_dough(self):
        self._pizza.set_dough("pan baked")

    def build_sauce(self):
        self._pizza.set_sauce("hot")

    def build_topping(self):
        self._pizza.set_topping("pepperoni+salami")


@register_pattern(
    "builder", "Builder", PatternCategory.CREATIONAL,
    summary="Build a product step by step through an abstract builder.",
    reference_url="https://en.wikipedia.org/wiki/Builder_pattern",
)
def builder_demo():
    """Build one pizza with each builder and print it."""
    for builder in (HawaiianPizzaBuilder(), SpicyPizzaBuilder()):
        builder.create_pizza().print()
