# src/patternbook/creational/factory.py
"""
Factory: a utility that creates an instance of a class from a family of
derived classes, chosen at runtime from a description or a type tag.

Callers only see the base interface; the factory is the one place that knows
the concrete classes, so adding a new kind means touching the factory alone.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from ..enums import PatternCategory, PizzaType
from ..registry import register_pattern


class Computer(ABC):

    @abstractmethod
    def run(self):
        ...

    @abstractmethod
    def stop(self):
        ...


class Laptop(Computer):

    def __init__(self):
        self.hibernating = False  # whether or not the machine is hibernating

    def run(self):
        self.hibernating = False

    def stop(self):
        self.hibernating = True


class Desktop(Computer):

    def __init__(self):
        self.on = False  # whether or not the machine has been turned on

    def run(self):
        self.on = True

    def stop(self):
        self.on = False


class ComputerFactory:
    """Returns a Computer given a real world description of it."""

    _kinds: Dict[str, Type[Computer]] = {
        "laptop": Laptop,
        "desktop": Desktop,
    }

    @classmethod
    def new_computer(cls, description: str) -> Optional[Computer]:
        kind = cls._kinds.get(description)
        return kind() if kind is not None else None


class Pizza(ABC):

    @abstractmethod
    def get_price(self) -> int:
        """Price in cents."""


class HamAndMushroomPizza(Pizza):

    def get_price(self) -> int:
        return 850


class DeluxePizza(Pizza):

    def get_price(self) -> int:
        return 1050


class HawaiianPizza(Pizza):

    def get_price(self) -> int:
        return 1150


class PizzaFactory:

    _pizzas: Dict[PizzaType, Type[Pizza]] = {
        PizzaType.HamMushroom: HamAndMushroomPizza,
        PizzaType.Deluxe: DeluxePizza,
        PizzaType.Hawaiian: HawaiianPizza,
    }

    @classmethod
    def create_pizza(cls, pizza_type: PizzaType) -> Pizza:
        try:
            return cls._pizzas[pizza_type]()
        except (KeyError, TypeError):
            raise ValueError("invalid pizza type") from None


def pizza_information(pizza_type: PizzaType):
    """Create a pizza of the given type and print its price."""
    pizza = PizzaFactory.create_pizza(pizza_type)
    print(f"Price of {pizza_type.value} is {pizza.get_price()}")


@register_pattern(
    "factory", "Factory", PatternCategory.CREATIONAL,
    summary="Pick the concrete pizza class from a type tag at runtime.",
    reference_url="https://en.wikipedia.org/wiki/Factory_method_pattern",
)
def factory_demo():
    for pizza_type in (PizzaType.HamMushroom, PizzaType.Deluxe, PizzaType.Hawaiian):
        pizza_information(pizza_type)


@register_pattern(
    "computer_factory", "Factory (by description)", PatternCategory.CREATIONAL,
    summary="Create computers from a string read at runtime.",
    reference_url="https://en.wikipedia.org/wiki/Factory_method_pattern",
)
def computer_factory_demo():
    for description in ("laptop", "desktop", "tablet"):
        computer = ComputerFactory.new_computer(description)
        if computer is None:
            print(f"No computer is known as '{description}'")
            continue
        computer.run()
        print(f"'{description}' built a {type(computer).__name__} and started it")
        computer.stop()
