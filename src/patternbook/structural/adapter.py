# src/patternbook/structural/adapter.py
"""
Adapter: convert the interface of a class into the interface clients expect,
so classes with incompatible interfaces can work together.
"""

from abc import ABC, abstractmethod

from ..enums import PatternCategory
from ..registry import register_pattern


class Hindu(ABC):
    """Target interface."""

    @abstractmethod
    def performs_hindu_ritual(self):
        ...


class HinduFemale(Hindu):

    def performs_hindu_ritual(self):
        print("Hindu girl performs Hindu ritual.")


class Muslim(ABC):
    """Adaptee interface."""

    @abstractmethod
    def performs_muslim_ritual(self):
        ...


class MuslimFemale(Muslim):

    def performs_muslim_ritual(self):
        print("Muslim girl performs Muslim ritual.")


class HinduRitual:
    """Client that only accepts the target interface."""

    def carry_out_ritual(self, hindu: Hindu):
        if not isinstance(hindu, Hindu):
            raise TypeError(f"{type(hindu).__name__} does not perform Hindu rituals")
        print("On with the Hindu rituals!")
        hindu.performs_hindu_ritual()


class HinduAdapter(Hindu):
    """Lets a Muslim take part where a Hindu is expected."""

    def __init__(self, muslim: Muslim):
        self.muslim = muslim

    def performs_hindu_ritual(self):
        # the adaptee still carries out its own ritual
        self.muslim.performs_muslim_ritual()


@register_pattern(
    "adapter", "Adapter", PatternCategory.STRUCTURAL,
    summary="Wrap an incompatible object so a client can use it.",
    reference_url="https://en.wikipedia.org/wiki/Adapter_pattern",
)
def adapter_demo():
    hindu_girl = HinduFemale()
    muslim_girl = MuslimFemale()

    hindu_ritual = HinduRitual()
    hindu_ritual.carry_out_ritual(hindu_girl)

    # hindu_ritual.carry_out_ritual(muslim_girl) would raise TypeError
    adapted_muslim = HinduAdapter(muslim_girl)
    hindu_ritual.carry_out_ritual(adapted_muslim)
