"""
Behavioral patterns: chain of responsibility, command, interpreter, iterator,
mediator, memento, observer, state, strategy, template method, visitor.
"""

from .chain import SpecialHandler
from .command import Light, FlipUpCommand, FlipDownCommand, Switch
from .interpreter import Evaluator, Number, Plus, Minus, Variable
from .iterator import IntLinkedList, Aggregate, AggregateSet
from .mediator import Colleague, Mediator
from .memento import Object, Memento, CommandHistory, UndoableCommand
from .observer import ParaWeatherData, CurrentCondition, Statistic
from .state import Fighter
from .strategy import Context, ConcreteStrategyA, ConcreteStrategyB, ConcreteStrategyC
from .template_method import Game, Chess, Monopoly
from .visitor import Car, CarElementPrintVisitor, CarElementDoVisitor

__all__ = [
    "SpecialHandler",
    "Light",
    "FlipUpCommand",
    "FlipDownCommand",
    "Switch",
    "Evaluator",
    "Number",
    "Plus",
    "Minus",
    "Variable",
    "IntLinkedList",
    "Aggregate",
    "AggregateSet",
    "Colleague",
    "Mediator",
    "Object",
    "Memento",
    "CommandHistory",
    "UndoableCommand",
    "ParaWeatherData",
    "CurrentCondition",
    "Statistic",
    "Fighter",
    "Context",
    "ConcreteStrategyA",
    "ConcreteStrategyB",
    "ConcreteStrategyC",
    "Game",
    "Chess",
    "Monopoly",
    "Car",
    "CarElementPrintVisitor",
    "CarElementDoVisitor",
]
