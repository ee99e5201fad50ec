# src/patternbook/behavioral/interpreter.py
"""
Interpreter: given a language, define a representation for its grammar along
with an interpreter that uses it to evaluate sentences.

The language is integer addition and subtraction over named variables,
written in postfix notation with tokens separated by single spaces:
``"w x z - +"`` means ``w + (x - z)``. The pattern does not cover parsing,
but a small stack based parser is included so sentences can be written as
strings.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List

from ..enums import PatternCategory
from ..registry import register_pattern


logger = logging.getLogger(__name__)


class Expression(ABC):

    @abstractmethod
    def interpret(self, variables: Dict[str, "Expression"]) -> int:
        ...


Context = Dict[str, Expression]


class Number(Expression):

    def __init__(self, number: int):
        self.number = number

    def interpret(self, variables: Context) -> int:
        return self.number

    def __repr__(self):
        return f"Number({self.number})"


class Plus(Expression):

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, variables: Context) -> int:
        return self.left.interpret(variables) + self.right.interpret(variables)

    def __repr__(self):
        return f"Plus({self.left!r}, {self.right!r})"


class Minus(Expression):

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, variables: Context) -> int:
        return self.left.interpret(variables) - self.right.interpret(variables)

    def __repr__(self):
        return f"Minus({self.left!r}, {self.right!r})"


class Variable(Expression):

    def __init__(self, name: str):
        self.name = name

    def interpret(self, variables: Context) -> int:
        # unbound variables evaluate to 0
        expression = variables.get(self.name)
        return expression.interpret(variables) if expression is not None else 0

    def __repr__(self):
        return f"Variable({self.name!r})"


class Evaluator(Expression):
    """Parses a postfix sentence once and interprets it against any context."""

    def __init__(self, expression: str):
        self.expression = expression
        self.syntax_tree = self._parse(expression)
        logger.debug(f"Parsed '{expression}' into {self.syntax_tree!r}")

    @staticmethod
    def _parse(expression: str) -> Expression:
        if not expression.strip():
            raise ValueError("Cannot parse an empty expression")
        stack: List[Expression] = []
        for token in expression.split(" "):
            if token in ("+", "-"):
                if len(stack) < 2:
                    raise ValueError(f"Operator '{token}' needs two operands in '{expression}'")
                right = stack.pop()
                left = stack.pop()
                stack.append(Plus(left, right) if token == "+" else Minus(left, right))
            else:
                stack.append(Variable(token))
        if len(stack) != 1:
            raise ValueError(f"Malformed expression '{expression}': "
                             f"{len(stack)} operands left after parsing")
        return stack[0]

    def interpret(self, variables: Context) -> int:
        return self.syntax_tree.interpret(variables)


@register_pattern(
    "interpreter", "Interpreter", PatternCategory.BEHAVIORAL,
    summary="Evaluate a postfix sentence for several variable bindings.",
    reference_url="https://en.wikipedia.org/wiki/Interpreter_pattern",
)
def interpreter_demo():
    sentence = Evaluator("w x z - +")  # w + (x - z)

    sequences = [(5, 10, 42), (1, 3, 2), (7, 9, -5)]
    for w, x, z in sequences:
        variables: Context = {"w": Number(w), "x": Number(x), "z": Number(z)}
        result = sentence.interpret(variables)
        print(f"Interpreter result: {result}")
