# src/patternbook/structural/flyweight.py
"""
Flyweight: save memory by sharing the properties that many similar objects
have in common.

Font sizes and font names are kept once, in the factory's tables. Each
character stores two small indices into those tables plus its own position in
the stream, instead of its own copy of the font data.
"""

from typing import List

from ..enums import PatternCategory
from ..registry import register_pattern


NUMBER_OF_SAME_TYPE_CHARS = 3


class FlyweightCharacterFactory:
    """Holds the shared state and creates the flyweights."""

    font_sizes: List[float] = [1.0, 1.5, 2.0]
    font_names: List[str] = ["first_font", "second_font", "third_font"]

    @classmethod
    def create_flyweight_character(cls, font_size_index: int, font_name_index: int,
                                   position_in_stream: int) -> "FlyweightCharacter":
        if not 0 <= font_size_index < len(cls.font_sizes):
            raise IndexError(f"font size index {font_size_index} out of range")
        if not 0 <= font_name_index < len(cls.font_names):
            raise IndexError(f"font name index {font_name_index} out of range")
        return FlyweightCharacter(font_size_index, font_name_index, position_in_stream)


class FlyweightCharacter:

    __slots__ = ("font_size_index", "font_name_index", "position_in_stream")

    def __init__(self, font_size_index: int, font_name_index: int, position_in_stream: int):
        self.font_size_index = font_size_index
        self.font_name_index = font_name_index
        self.position_in_stream = position_in_stream

    @property
    def font_size(self) -> float:
        return FlyweightCharacterFactory.font_sizes[self.font_size_index]

    @property
    def font_name(self) -> str:
        return FlyweightCharacterFactory.font_names[self.font_name_index]

    def describe(self) -> str:
        return (f"Font Size: {self.font_size:g}, font Name: {self.font_name}, "
                f"character stream position: {self.position_in_stream}")

    def print(self):
        print(self.describe())


def build_character_stream(limit: int = NUMBER_OF_SAME_TYPE_CHARS) -> List[FlyweightCharacter]:
    """Three groups of ``limit`` characters, one group per font."""
    create = FlyweightCharacterFactory.create_flyweight_character
    chars = []
    for i in range(limit):
        chars.append(create(0, 0, i))
        chars.append(create(1, 1, i + 1 * limit))
        chars.append(create(2, 2, i + 2 * limit))
    return chars


@register_pattern(
    "flyweight", "Flyweight", PatternCategory.STRUCTURAL,
    summary="Characters share font data through indices into common tables.",
    reference_url="https://en.wikipedia.org/wiki/Flyweight_pattern",
)
def flyweight_demo():
    for char in build_character_stream():
        char.print()
