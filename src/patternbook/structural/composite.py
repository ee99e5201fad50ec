# src/patternbook/structural/composite.py
"""
Composite: treat individual objects and compositions of objects uniformly,
building tree structures for part-whole hierarchies.
"""

from abc import ABC, abstractmethod
from typing import List

from ..enums import PatternCategory
from ..registry import register_pattern


class Graphic(ABC):

    @abstractmethod
    def print(self):
        ...


class Ellipse(Graphic):

    def print(self):
        print("Ellipse")


class CompositeGraphic(Graphic):

    def __init__(self):
        self.graphics: List[Graphic] = []

    def print(self):
        for graphic in self.graphics:
            graphic.print()

    def add(self, graphic: Graphic):
        self.graphics.append(graphic)

    def remove(self, graphic: Graphic):
        self.graphics.remove(graphic)


@register_pattern(
    "composite", "Composite", PatternCategory.STRUCTURAL,
    summary="Print a tree of graphics through the same interface as a leaf.",
    reference_url="https://en.wikipedia.org/wiki/Composite_pattern",
)
def composite_demo():
    ellipse1, ellipse2, ellipse3, ellipse4 = (Ellipse() for _ in range(4))

    graphic = CompositeGraphic()
    graphic1 = CompositeGraphic()
    graphic2 = CompositeGraphic()

    graphic.add(graphic1)
    graphic.add(graphic2)
    graphic1.add(ellipse1)
    graphic1.add(ellipse2)
    graphic1.add(ellipse3)
    graphic2.add(ellipse4)

    # four times "Ellipse"
    graphic.print()
