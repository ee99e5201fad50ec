# src/patternbook/config.py
"""
Configuration and data structures for the patternbook catalogue.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .enums import PatternCategory


@dataclass
class PatternInfo:
    """Catalogue entry describing one demo."""
    key: str
    title: str
    category: PatternCategory
    summary: str = ""
    reference_url: str = ""
    interactive: bool = False  # demo reads menu choices
    uses_random: bool = False  # demo takes a random.Random


@dataclass
class CatalogConfig:
    """Demo runner configuration."""
    interactive: bool = False  # read menu choices from stdin instead of the scripts below
    seed: Optional[int] = None  # seed for demos that roll dice (state, template method)
    enable_profiling: bool = False  # record time and memory per demo

    # Scripted answers used when not interactive
    memento_inputs: Tuple[int, ...] = field(
        default_factory=lambda: (7, 1, 2, 3, 3, 3, 4, 4, 4, 1, 0)
    )
    state_inputs: Tuple[int, ...] = field(default_factory=lambda: (2, 0))

    # Debug/Verbose mode
    verbose: bool = False  # Enable detailed logging for debugging
