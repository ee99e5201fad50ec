# src/patternbook/behavioral/template_method.py
"""
Template Method: define the skeleton of an algorithm in one operation and
defer some of its steps to subclasses, which can redefine those steps without
changing the algorithm's structure.

The skeleton here is a turn based game where players take turns until one of
them wins. Chess and Monopoly fill in the steps.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional

from ..enums import PatternCategory
from ..registry import register_pattern


class Game(ABC):
    """Common to games where players play in turn, one at a time."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.players_count = 0
        self.moves_count = 0
        self.player_won = -1

    def play_one_game(self, players_count: int = 0) -> int:
        """Play until someone wins. Returns the winning player."""
        self.players_count = players_count
        self.moves_count = 0
        self.player_won = -1

        self.initialize_game()
        # some games fix the number of players in initialize_game()
        if self.players_count <= 0:
            raise ValueError(f"{type(self).__name__} needs at least one player")

        current_player = 0
        while not self.end_of_game():
            self.make_play(current_player)
            current_player = (current_player + 1) % self.players_count
            if current_player == 0:
                self.moves_count += 1

        self.print_winner()
        return self.player_won

    @abstractmethod
    def initialize_game(self):
        ...

    @abstractmethod
    def make_play(self, player: int):
        ...

    def end_of_game(self) -> bool:
        return self.player_won != -1

    @abstractmethod
    def print_winner(self):
        ...


class Monopoly(Game):

    MIN_MOVES = 20

    def initialize_game(self):
        # initialize players' money, shuffle chance and community chest cards
        pass

    def make_play(self, player: int):
        # takes at least 20 turns for a player to win
        if self.moves_count < self.MIN_MOVES:
            return
        chances = min(self.moves_count, 199)
        if self.rng.randint(0, 200) < chances:
            self.player_won = player

    def print_winner(self):
        print(f"Monopoly player {self.player_won} won in {self.moves_count} moves.")


class Chess(Game):

    MIN_MOVES = 10

    def initialize_game(self):
        self.players_count = 2
        # place the pieces on the board

    def make_play(self, player: int):
        # takes at least 10 turns for a player to win
        if self.moves_count < self.MIN_MOVES:
            return
        # checkmate or stalemate
        chances = min(self.moves_count, 99)
        if self.rng.randint(0, 100) < chances:
            self.player_won = player

    def print_winner(self):
        print(f"Chess Player {self.player_won} won in {self.moves_count} moves.")


@register_pattern(
    "template_method", "Template Method", PatternCategory.BEHAVIORAL,
    summary="Chess and Monopoly fill in the steps of one game loop.",
    reference_url="https://en.wikipedia.org/wiki/Template_method_pattern",
    uses_random=True,
)
def template_method_demo(rng: Optional[random.Random] = None):
    rng = rng if rng is not None else random.Random()

    chess = Chess(rng)
    for _ in range(10):
        chess.play_one_game()

    monopoly = Monopoly(rng)
    for i in range(10):
        monopoly.play_one_game((i % 7) + 2)
