# src/patternbook/behavioral/state.py
"""
State: an object alters its behavior when its internal state changes, and
appears to change its class.

A fighter delegates every input to its current state object. States decide
what the input means, print what happens and move the fighter to the next
state, which then updates the fighter's fatigue.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..enums import FighterInput, PatternCategory
from ..prompts import Reader, read_int
from ..registry import register_pattern


logger = logging.getLogger(__name__)


class FighterState(ABC):

    @abstractmethod
    def handle_input(self, fighter: "Fighter", user_input: FighterInput):
        ...

    @abstractmethod
    def update(self, fighter: "Fighter"):
        """Called when the fighter enters this state."""


class StandingState(FighterState):

    def handle_input(self, fighter: "Fighter", user_input: FighterInput):
        if user_input is FighterInput.STAND_UP:
            print(f"{fighter.get_name()} remains standing.")
        elif user_input is FighterInput.DUCK_DOWN:
            fighter.ducks_down()
            fighter.change_state("ducking")
        elif user_input is FighterInput.JUMP:
            fighter.jumps()
            fighter.change_state("jumping")
        else:
            print(f"One cannot do that while standing.  {fighter.get_name()} "
                  "remains standing by default.")

    def update(self, fighter: "Fighter"):
        if fighter.get_fatigue_level() > 0:
            fighter.change_fatigue_level_by(-1)


class DuckingState(FighterState):

    FULL_REST_TIME = 5

    def __init__(self):
        self.charging_time = 0

    def handle_input(self, fighter: "Fighter", user_input: FighterInput):
        if user_input is FighterInput.STAND_UP:
            fighter.change_state("standing")
            fighter.stands_up()
        elif user_input is FighterInput.DUCK_DOWN:
            if self.charging_time < self.FULL_REST_TIME:
                print(f"{fighter.get_name()} remains in ducking position, "
                      "recovering in the meantime.")
            else:
                print(f"{fighter.get_name()} remains in ducking position, fully recovered.")
            self.update(fighter)
        else:
            print(f"One cannot do that while ducking.  {fighter.get_name()} "
                  "remains in ducking position by default.")
            self.update(fighter)

    def update(self, fighter: "Fighter"):
        self.charging_time += 1
        print(f"Charging time = {self.charging_time}.")
        if fighter.get_fatigue_level() > 0:
            fighter.change_fatigue_level_by(-1)
        if self.charging_time >= self.FULL_REST_TIME and fighter.get_fatigue_level() <= 3:
            fighter.feels_strong()


class JumpingState(FighterState):

    def __init__(self, rng: random.Random):
        self.rng = rng
        self.jumping_height = 0

    def handle_input(self, fighter: "Fighter", user_input: FighterInput):
        if user_input is FighterInput.DIVE:
            fighter.change_state("diving")
            fighter.dives()
        else:
            print(f"One cannot do that in the middle of a jump.  {fighter.get_name()} "
                  "lands from his jump and is now standing again.")
            fighter.change_state("standing")

    def update(self, fighter: "Fighter"):
        self.jumping_height = self.rng.randint(1, 5)
        print(f"{fighter.get_name()} has jumped {self.jumping_height} feet into the air.")
        if self.jumping_height >= 3:
            fighter.change_fatigue_level_by(1)


class DivingState(FighterState):

    def handle_input(self, fighter: "Fighter", user_input: FighterInput):
        print(f"Regardless of what the user input is, {fighter.get_name()} "
              "lands from his dive and is now standing again.")
        fighter.change_state("standing")

    def update(self, fighter: "Fighter"):
        fighter.change_fatigue_level_by(2)


class Fighter:
    """Context object. Owns one instance of every state."""

    def __init__(self, name: str, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.name = name
        self.fatigue_level = self.rng.randrange(10)
        self.states: Dict[str, FighterState] = {
            "standing": StandingState(),
            "ducking": DuckingState(),
            "jumping": JumpingState(self.rng),
            "diving": DivingState(),
        }
        self.state_name = "standing"

    @property
    def state(self) -> FighterState:
        return self.states[self.state_name]

    def get_name(self) -> str:
        return self.name

    def get_fatigue_level(self) -> int:
        return self.fatigue_level

    def handle_input(self, user_input: FighterInput):
        self.state.handle_input(self, user_input)

    def change_state(self, state_name: str):
        if state_name not in self.states:
            raise ValueError(f"Unknown fighter state '{state_name}'")
        logger.debug(f"{self.name}: {self.state_name} -> {state_name}")
        self.state_name = state_name
        self.state.update(self)

    def stands_up(self):
        print(f"{self.name} stands up.")

    def ducks_down(self):
        print(f"{self.name} ducks down.")

    def jumps(self):
        print(f"{self.name} jumps into the air.")

    def dives(self):
        print(f"{self.name} makes a dive attack in the middle of the jump!")

    def feels_strong(self):
        print(f"{self.name} feels strong!")

    def change_fatigue_level_by(self, change: int):
        self.fatigue_level += change
        print(f"fatigueLevel = {self.fatigue_level}")


MENU = (f"{FighterInput.DUCK_DOWN.value}) Duck down  "
        f"{FighterInput.STAND_UP.value}) Stand up  "
        f"{FighterInput.JUMP.value}) Jump  "
        f"{FighterInput.DIVE.value}) Dive in the middle of a jump")


def choose_action(fighter: Fighter, read: Reader) -> bool:
    """Ask for one input for ``fighter`` and apply it. False when input ran out."""
    print()
    print(MENU)
    prompt = f"Choice for {fighter.get_name()}? "
    while True:
        try:
            number = read_int(read, prompt)
        except EOFError:
            return False
        try:
            user_input = FighterInput(number)
        except ValueError:
            prompt = "Invalid choice. Please try again: "
            continue
        fighter.handle_input(user_input)
        return True


@register_pattern(
    "state", "State", PatternCategory.BEHAVIORAL,
    summary="Fighters react to inputs according to their current stance.",
    reference_url="https://en.wikipedia.org/wiki/State_pattern",
    interactive=True,
    uses_random=True,
)
def state_demo(read: Reader = input, rng: Optional[random.Random] = None):
    rng = rng if rng is not None else random.Random()
    rex = Fighter("Rex the Fighter", rng)
    borg = Fighter("Borg the Fighter", rng)
    print(f"{rex.get_name()} and {borg.get_name()} are currently standing.")

    for fighter in (rex, borg):
        if not choose_action(fighter, read):
            break
