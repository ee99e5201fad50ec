# src/patternbook/behavioral/memento.py
"""
Memento: capture and externalize an object's internal state, without breaking
encapsulation, so the object can be restored to it later.

The originator snapshots itself into a memento and hands it to a caretaker,
which keeps it until the originator wants to go back. The classic use is
undo/redo: every command snapshots its receiver before acting, and the
history walks back and forth over those snapshots.
"""

import copy
import logging
from typing import Callable, List

from ..enums import MementoAction, PatternCategory
from ..prompts import Reader, read_int
from ..registry import register_pattern


logger = logging.getLogger(__name__)


class Object:
    """The originator. Imagine it has loads of other data members."""

    def __init__(self, value: int):
        self.value = value
        self.base_name = "Object: "
        self.decimal = value / 100

    def double_value(self):
        self.value = 2 * self.value
        self.decimal = self.value / 100

    def increase_by_one(self):
        self.value += 1
        self.decimal = self.value / 100

    def get_value(self) -> int:
        return self.value

    def get_name(self) -> str:
        return f"{self.base_name}{self.value}"

    def get_decimal(self) -> float:
        return self.decimal

    def create_memento(self) -> "Memento":
        return Memento(self)

    def reinstate_memento(self, memento: "Memento"):
        self.__dict__.update(copy.deepcopy(memento.snapshot().__dict__))


class Memento:
    """Opaque snapshot of a whole Object."""

    def __init__(self, obj: Object):
        self._state = copy.deepcopy(obj)

    def snapshot(self) -> Object:
        return self._state


class CommandHistory:
    """Caretaker for executed commands and the mementos taken before each one.

    ``num_commands`` is the number of commands currently applied. Entries at or
    beyond it are undone commands that redo can re-apply, until a new command
    is executed and discards them.
    """

    def __init__(self):
        self.commands: List["UndoableCommand"] = []
        self.mementos: List[Memento] = []
        self.num_commands = 0

    def record(self, command: "UndoableCommand", memento: Memento):
        del self.commands[self.num_commands:]
        del self.mementos[self.num_commands:]
        self.commands.append(command)
        self.mementos.append(memento)
        self.num_commands += 1

    def can_undo(self) -> bool:
        return self.num_commands > 0

    def can_redo(self) -> bool:
        return self.num_commands < len(self.commands)

    def undo(self) -> bool:
        if not self.can_undo():
            print("There is nothing to undo")
            return False
        self.num_commands -= 1
        command = self.commands[self.num_commands]
        command.receiver.reinstate_memento(self.mementos[self.num_commands])
        logger.debug(f"Undid command {self.num_commands}")
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            print("There is nothing to redo")
            return False
        self.commands[self.num_commands].apply()
        self.num_commands += 1
        logger.debug(f"Redid command {self.num_commands - 1}")
        return True


class UndoableCommand:
    """Binds an Object method to a receiver and records itself in a history."""

    def __init__(self, receiver: Object, action: Callable[[Object], None],
                 history: CommandHistory):
        self.receiver = receiver
        self.action = action
        self.history = history

    def execute(self):
        self.history.record(self, self.receiver.create_memento())
        self.apply()

    def apply(self):
        self.action(self.receiver)


def _read_choice(read: Reader, prompt: str) -> MementoAction:
    while True:
        try:
            number = read_int(read, prompt)
        except EOFError:
            return MementoAction.EXIT
        try:
            return MementoAction(number)
        except ValueError:
            prompt = "Invalid choice. Please try again: "


MENU = "0.Exit,  1.Double,  2.Increase by one,  3.Undo,  4.Redo: "


@register_pattern(
    "memento", "Memento", PatternCategory.BEHAVIORAL,
    summary="Undo and redo commands by restoring snapshots of their receiver.",
    reference_url="https://en.wikipedia.org/wiki/Memento_pattern",
    interactive=True,
)
def memento_demo(read: Reader = input):
    start = None
    while start is None:
        try:
            start = read_int(read, "Memento Test: Please enter an integer: ")
        except EOFError:
            return
    obj = Object(start)
    history = CommandHistory()
    double_command = UndoableCommand(obj, Object.double_value, history)
    increment_command = UndoableCommand(obj, Object.increase_by_one, history)

    choice = _read_choice(read, MENU)
    while choice is not MementoAction.EXIT:
        if choice is MementoAction.DOUBLE:
            double_command.execute()
        elif choice is MementoAction.INCREASE:
            increment_command.execute()
        elif choice is MementoAction.UNDO:
            history.undo()
        elif choice is MementoAction.REDO:
            history.redo()
        print(f" {obj.get_value()}  {obj.get_name()}  {obj.get_decimal():g}")
        choice = _read_choice(read, MENU)
