# src/patternbook/enums.py
"""
Enumeration types for the patternbook catalogue.
"""

from enum import Enum


class PatternCategory(Enum):
    """Gang-of-Four pattern families, plus language idioms."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    IDIOM = "idiom"


class PizzaType(Enum):
    """Pizzas the simple factory knows how to make."""
    HamMushroom = "HamMushroom"
    Deluxe = "Deluxe"
    Hawaiian = "Hawaiian"


class RecordType(Enum):
    """Opaque record kinds, avoids exposing concrete prototypes."""
    CAR = "car"
    BIKE = "bike"
    PERSON = "person"


class FighterInput(Enum):
    """Inputs a fighter reacts to. Values double as menu numbers."""
    DUCK_DOWN = 0
    STAND_UP = 1
    JUMP = 2
    DIVE = 3


class MementoAction(Enum):
    """Menu of the undo/redo demo."""
    EXIT = 0
    DOUBLE = 1
    INCREASE = 2
    UNDO = 3
    REDO = 4
