# src/patternbook/behavioral/visitor.py
"""
Visitor: an operation performed on the elements of an object structure,
defined without changing the classes of those elements.
"""

from abc import ABC, abstractmethod
from typing import List

from ..enums import PatternCategory
from ..registry import register_pattern


class CarElementVisitor(ABC):

    @abstractmethod
    def visit_wheel(self, wheel: "Wheel"):
        ...

    @abstractmethod
    def visit_engine(self, engine: "Engine"):
        ...

    @abstractmethod
    def visit_body(self, body: "Body"):
        ...

    @abstractmethod
    def visit_car(self, car: "Car"):
        ...


class CarElement(ABC):

    @abstractmethod
    def accept(self, visitor: CarElementVisitor):
        ...


class Wheel(CarElement):

    def __init__(self, name: str):
        self.name = name

    def get_name(self) -> str:
        return self.name

    def accept(self, visitor: CarElementVisitor):
        visitor.visit_wheel(self)


class Engine(CarElement):

    def accept(self, visitor: CarElementVisitor):
        visitor.visit_engine(self)


class Body(CarElement):

    def accept(self, visitor: CarElementVisitor):
        visitor.visit_body(self)


class Car:
    """All car elements together."""

    def __init__(self):
        self.elements: List[CarElement] = [
            Wheel("front left"),
            Wheel("front right"),
            Wheel("back left"),
            Wheel("back right"),
            Body(),
            Engine(),
        ]

    def get_elements(self) -> List[CarElement]:
        return self.elements

    def accept(self, visitor: CarElementVisitor):
        visitor.visit_car(self)


# The two visitors below add behaviour to the parts without touching Car.

class CarElementPrintVisitor(CarElementVisitor):

    def visit_wheel(self, wheel: Wheel):
        print(f"Visiting {wheel.get_name()} wheel")

    def visit_engine(self, engine: Engine):
        print("Visiting engine")

    def visit_body(self, body: Body):
        print("Visiting body")

    def visit_car(self, car: Car):
        print("Visiting car")
        for element in car.get_elements():
            element.accept(self)
        print("Visited car")


class CarElementDoVisitor(CarElementVisitor):

    def visit_wheel(self, wheel: Wheel):
        print(f"Kicking my {wheel.get_name()} wheel")

    def visit_engine(self, engine: Engine):
        print("Starting my engine")

    def visit_body(self, body: Body):
        print("Moving my body")

    def visit_car(self, car: Car):
        print()
        print("Starting my car")
        for element in car.get_elements():
            element.accept(self)
        print("Started car")


@register_pattern(
    "visitor", "Visitor", PatternCategory.BEHAVIORAL,
    summary="Print and operate on car parts through two visitors.",
    reference_url="https://en.wikipedia.org/wiki/Visitor_pattern",
)
def visitor_demo():
    car = Car()
    car.accept(CarElementPrintVisitor())
    car.accept(CarElementDoVisitor())
