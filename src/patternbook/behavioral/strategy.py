# src/patternbook/behavioral/strategy.py
"""
Strategy: a family of interchangeable algorithms, each encapsulated, so the
algorithm can vary independently from the clients that use it.
"""

from abc import ABC, abstractmethod

from ..enums import PatternCategory
from ..registry import register_pattern


class StrategyInterface(ABC):

    @abstractmethod
    def execute(self):
        ...


class ConcreteStrategyA(StrategyInterface):

    def execute(self):
        print("Called ConcreteStrategyA execute method")


class ConcreteStrategyB(StrategyInterface):

    def execute(self):
        print("Called ConcreteStrategyB execute method")


class ConcreteStrategyC(StrategyInterface):

    def execute(self):
        print("Called ConcreteStrategyC execute method")


class Context:

    def __init__(self, strategy: StrategyInterface):
        self.strategy = strategy

    def set_strategy(self, strategy: StrategyInterface):
        self.strategy = strategy

    def execute(self):
        self.strategy.execute()


@register_pattern(
    "strategy", "Strategy", PatternCategory.BEHAVIORAL,
    summary="Swap the algorithm a context runs.",
    reference_url="https://en.wikipedia.org/wiki/Strategy_pattern",
)
def strategy_demo():
    strategy_a = ConcreteStrategyA()
    strategy_b = ConcreteStrategyB()
    strategy_c = ConcreteStrategyC()

    context_a = Context(strategy_a)
    context_b = Context(strategy_b)
    context_c = Context(strategy_c)

    context_a.execute()
    context_b.execute()
    context_c.execute()

    context_a.set_strategy(strategy_b)
    context_a.execute()
    context_a.set_strategy(strategy_c)
    context_a.execute()
