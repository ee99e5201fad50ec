"""
Creational patterns: builder, factory, prototype, singleton.
"""

from .builder import Pizza, PizzaBuilder, HawaiianPizzaBuilder, SpicyPizzaBuilder
from .factory import ComputerFactory, Laptop, Desktop, PizzaFactory
from .prototype import (
    RecordFactory,
    CarRecord,
    BikeRecord,
    PersonRecord,
    GreenMonster,
    PurpleMonster,
    BellyMonster,
    do_some_stuff_with_a_monster,
)
from .singleton import Singleton, SingletonMeta, StringSingleton

__all__ = [
    "Pizza",
    "PizzaBuilder",
    "HawaiianPizzaBuilder",
    "SpicyPizzaBuilder",
    "ComputerFactory",
    "Laptop",
    "Desktop",
    "PizzaFactory",
    "RecordFactory",
    "CarRecord",
    "BikeRecord",
    "PersonRecord",
    "GreenMonster",
    "PurpleMonster",
    "BellyMonster",
    "do_some_stuff_with_a_monster",
    "Singleton",
    "SingletonMeta",
    "StringSingleton",
]
