# src/patternbook/behavioral/command.py
"""
Command: encapsulate a request as an object, decoupling the sender from the
receiver. Clients can be parameterized with requests, which can also be
queued, logged or undone (see the memento module for undo).
"""

from abc import ABC, abstractmethod

from ..enums import PatternCategory
from ..registry import register_pattern


class Command(ABC):

    @abstractmethod
    def execute(self):
        ...

    def __call__(self):
        self.execute()


class Light:
    """Receiver."""

    def __init__(self):
        self.is_on = False

    def turn_on(self):
        self.is_on = True
        print("The light is on")

    def turn_off(self):
        self.is_on = False
        print("The light is off")


class FlipUpCommand(Command):

    def __init__(self, light: Light):
        self.light = light

    def execute(self):
        self.light.turn_on()


class FlipDownCommand(Command):

    def __init__(self, light: Light):
        self.light = light

    def execute(self):
        self.light.turn_off()


class Switch:
    """Invoker. Knows nothing about lights, only about commands."""

    def __init__(self, flip_up_command: Command, flip_down_command: Command):
        self.flip_up_command = flip_up_command
        self.flip_down_command = flip_down_command

    def flip_up(self):
        self.flip_up_command.execute()

    def flip_down(self):
        self.flip_down_command.execute()


@register_pattern(
    "command", "Command", PatternCategory.BEHAVIORAL,
    summary="A switch flips a light through command objects.",
    reference_url="https://en.wikipedia.org/wiki/Command_pattern",
)
def command_demo():
    lamp = Light()
    switch = Switch(FlipUpCommand(lamp), FlipDownCommand(lamp))
    switch.flip_up()
    switch.flip_down()
