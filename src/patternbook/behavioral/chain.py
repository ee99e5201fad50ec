# src/patternbook/behavioral/chain.py
"""
Chain of Responsibility: avoid coupling the sender of a request to its
receiver by giving more than one object a chance to handle it. Receivers are
chained and the request travels along the chain until one handles it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..enums import PatternCategory
from ..registry import register_pattern


class Handler(ABC):

    def __init__(self):
        self.next: Optional["Handler"] = None

    def set_next_handler(self, next_in_line: "Handler") -> "Handler":
        """Attach the next handler and return it, so chains can be built fluently."""
        self.next = next_in_line
        return next_in_line

    @abstractmethod
    def request(self, value: int) -> Optional[int]:
        """Handle or forward ``value``. Returns the id of the handler that took it."""


class SpecialHandler(Handler):

    def __init__(self, limit: int, handler_id: int):
        super().__init__()
        self.limit = limit
        self.handler_id = handler_id

    def request(self, value: int) -> Optional[int]:
        if value < self.limit:
            print(f"Handler {self.handler_id} handled the request with a limit of {self.limit}")
            return self.handler_id
        if self.next is not None:
            return self.next.request(value)
        print(f"Sorry, I am the last handler ({self.handler_id}) and I can't handle the request.")
        return None


@register_pattern(
    "chain_of_responsibility", "Chain of Responsibility", PatternCategory.BEHAVIORAL,
    summary="Pass a request along handlers with rising limits.",
    reference_url="https://en.wikipedia.org/wiki/Chain-of-responsibility_pattern",
)
def chain_of_responsibility_demo():
    h1 = SpecialHandler(10, 1)
    h2 = SpecialHandler(20, 2)
    h3 = SpecialHandler(30, 3)
    h1.set_next_handler(h2).set_next_handler(h3)

    h1.request(18)
    h1.request(40)
