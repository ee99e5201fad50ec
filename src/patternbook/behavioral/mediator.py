# src/patternbook/behavioral/mediator.py
"""
Mediator: an object that encapsulates how a set of objects interact, so the
colleagues never refer to each other directly.
"""

from abc import ABC, abstractmethod
from typing import List

from ..enums import PatternCategory
from ..registry import register_pattern


class MediatorInterface(ABC):

    def __init__(self):
        self._colleagues: List["ColleagueInterface"] = []

    def register_colleague(self, colleague: "ColleagueInterface"):
        self._colleagues.append(colleague)

    @property
    def colleagues(self) -> List["ColleagueInterface"]:
        return list(self._colleagues)

    @abstractmethod
    def distribute_message(self, sender: "ColleagueInterface", message: str):
        ...


class ColleagueInterface(ABC):

    def __init__(self, name: str):
        self.name = name

    def get_name(self) -> str:
        return self.name

    @abstractmethod
    def send_message(self, mediator: MediatorInterface, message: str):
        ...

    @abstractmethod
    def receive_message(self, sender: "ColleagueInterface", message: str):
        ...


class Colleague(ColleagueInterface):

    def send_message(self, mediator: MediatorInterface, message: str):
        mediator.distribute_message(self, message)

    def receive_message(self, sender: ColleagueInterface, message: str):
        print(f"{self.get_name()} received the message from {sender.get_name()}: {message}")


class Mediator(MediatorInterface):

    def distribute_message(self, sender: ColleagueInterface, message: str):
        for colleague in self._colleagues:
            if colleague is not sender:  # do not send the message back to the sender
                colleague.receive_message(sender, message)


@register_pattern(
    "mediator", "Mediator", PatternCategory.BEHAVIORAL,
    summary="Colleagues talk only through the mediators they are registered with.",
    reference_url="https://en.wikipedia.org/wiki/Mediator_pattern",
)
def mediator_demo():
    bob = Colleague("Bob")
    sam = Colleague("Sam")
    frank = Colleague("Frank")
    tom = Colleague("Tom")

    mediator_staff = Mediator()
    for colleague in (bob, sam, frank, tom):
        mediator_staff.register_colleague(colleague)
    bob.send_message(mediator_staff, "I'm quitting this job!")

    # Sam's buddies only
    mediator_sams_buddies = Mediator()
    mediator_sams_buddies.register_colleague(frank)
    mediator_sams_buddies.register_colleague(tom)
    sam.send_message(mediator_sams_buddies, "Hooray!  He's gone!  Let's go for a drink, guys!")
