# src/patternbook/runner.py
"""
Demo runner for the patternbook catalogue.
"""

import logging
import random
from typing import Iterable, List, Optional

from .config import CatalogConfig, PatternInfo
from .enums import PatternCategory
from .profiler import DemoProfiler
from .prompts import ScriptedInput
from .registry import PatternRegistry, default_registry

# Importing the pattern packages registers their demos
from . import creational, structural, behavioral  # noqa: F401


# Set up logging
logger = logging.getLogger(__name__)
package_logger = logging.getLogger("patternbook")


class DemoRunner:
    """Runs registered demos one after another."""

    def __init__(self, config: Optional[CatalogConfig] = None,
                 registry: Optional[PatternRegistry] = None):
        self.config = config or CatalogConfig()
        self.registry = registry if registry is not None else default_registry

        # Set up logging based on config
        if self.config.verbose:
            package_logger.setLevel(logging.INFO)
        else:
            package_logger.setLevel(logging.WARNING)

        self.profiler = DemoProfiler(self.config) if self.config.enable_profiling else None
        self.rng = random.Random(self.config.seed)
        self.completed: List[str] = []

    def _reader_for(self, info: PatternInfo):
        """stdin when interactive, otherwise this demo's scripted answers."""
        if self.config.interactive:
            return input
        scripts = {
            "memento": self.config.memento_inputs,
            "state": self.config.state_inputs,
        }
        return ScriptedInput(scripts.get(info.key, ()))

    def run(self, key: str):
        """Run a single demo by key. Unknown keys raise KeyError."""
        info, demo = self.registry.get(key)

        kwargs = {}
        if info.interactive:
            kwargs["read"] = self._reader_for(info)
        if info.uses_random:
            kwargs["rng"] = self.rng

        logger.info(f"Running demo '{key}' ({info.category.value})")
        if self.profiler is not None:
            with self.profiler.measure(key):
                demo(**kwargs)
        else:
            demo(**kwargs)
        self.completed.append(key)

    def run_many(self, keys: Iterable[str]):
        keys = list(keys)
        # resolve every name before running anything
        for key in keys:
            self.registry.get(key)
        for key in keys:
            self.print_banner(self.registry.info(key))
            self.run(key)

    def run_all(self, category: Optional[PatternCategory] = None):
        """Run every demo in catalogue order, optionally one category only."""
        self.run_many(self.registry.keys(category))

    @staticmethod
    def print_banner(info: PatternInfo):
        print()
        print(f"=== {info.title} ===")
