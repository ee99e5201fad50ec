# src/patternbook/structural/bridge.py
"""
Bridge: separate an abstraction from its implementation so the two can vary
independently.
"""

from abc import ABC, abstractmethod

from ..enums import PatternCategory
from ..registry import register_pattern


class DrawingAPI(ABC):
    """Implementor."""

    @abstractmethod
    def draw_circle(self, x: float, y: float, radius: float):
        ...


class DrawingAPI1(DrawingAPI):

    def draw_circle(self, x: float, y: float, radius: float):
        print(f"API1.circle at {x:g}:{y:g} {radius:g}")


class DrawingAPI2(DrawingAPI):

    def draw_circle(self, x: float, y: float, radius: float):
        print(f"API2.circle at {x:g}:{y:g} {radius:g}")


class Shape(ABC):
    """Abstraction."""

    @abstractmethod
    def draw(self):
        ...

    @abstractmethod
    def resize_by_percentage(self, pct: float):
        ...


class CircleShape(Shape):

    def __init__(self, x: float, y: float, radius: float, drawing_api: DrawingAPI):
        self.x = x
        self.y = y
        self.radius = radius
        self.drawing_api = drawing_api

    def draw(self):
        self.drawing_api.draw_circle(self.x, self.y, self.radius)

    def resize_by_percentage(self, pct: float):
        # pct is a factor: 2.5 makes the circle two and a half times larger
        self.radius *= pct


@register_pattern(
    "bridge", "Bridge", PatternCategory.STRUCTURAL,
    summary="Draw the same shape abstraction through two drawing APIs.",
    reference_url="https://en.wikipedia.org/wiki/Bridge_pattern",
)
def bridge_demo():
    circle1 = CircleShape(1, 2, 3, DrawingAPI1())
    circle2 = CircleShape(5, 7, 11, DrawingAPI2())
    circle1.resize_by_percentage(2.5)
    circle2.resize_by_percentage(2.5)
    circle1.draw()
    circle2.draw()
