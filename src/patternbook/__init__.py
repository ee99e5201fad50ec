# src/patternbook/__init__.py
"""
patternbook: a catalogue of classic object-oriented design patterns
Each pattern is a small, self-contained demo that prints what it does.
"""

from .enums import PatternCategory, PizzaType, RecordType, FighterInput, MementoAction
from .config import CatalogConfig, PatternInfo
from .registry import PatternRegistry, default_registry, register_pattern
from .prompts import ScriptedInput
from .profiler import DemoProfiler
from .runner import DemoRunner

__version__ = "0.1.0"
__all__ = [
    "DemoRunner",
    "CatalogConfig",
    "PatternInfo",
    "PatternCategory",
    "PatternRegistry",
    "default_registry",
    "register_pattern",
    "ScriptedInput",
    "DemoProfiler",
    "PizzaType",
    "RecordType",
    "FighterInput",
    "MementoAction",
]
