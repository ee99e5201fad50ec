# src/patternbook/registry.py
"""
Catalogue of registered pattern demos.
"""

import logging
from collections import OrderedDict
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .config import PatternInfo
from .enums import PatternCategory


logger = logging.getLogger(__name__)

Demo = Callable[..., None]


class PatternRegistry:
    """Ordered mapping of demo key to (info, demo function)."""

    def __init__(self):
        self._entries: "OrderedDict[str, Tuple[PatternInfo, Demo]]" = OrderedDict()

    def register(self, info: PatternInfo, demo: Demo) -> Demo:
        """Register a demo under ``info.key``. Keys must be unique."""
        if info.key in self._entries:
            raise ValueError(f"Demo '{info.key}' is already registered")
        self._entries[info.key] = (info, demo)
        logger.debug(f"Registered demo '{info.key}' ({info.category.value})")
        return demo

    def get(self, key: str) -> Tuple[PatternInfo, Demo]:
        """Look up a demo, raising KeyError with the known keys on a miss."""
        try:
            return self._entries[key]
        except KeyError:
            known = ", ".join(self._entries)
            raise KeyError(f"Unknown demo '{key}'. Known demos: {known}") from None

    def info(self, key: str) -> PatternInfo:
        return self.get(key)[0]

    def keys(self, category: Optional[PatternCategory] = None) -> List[str]:
        """Demo keys in catalogue order, optionally filtered by category."""
        return [
            key for key, (info, _) in self._entries.items()
            if category is None or info.category == category
        ]

    def by_category(self) -> Dict[PatternCategory, List[PatternInfo]]:
        grouped: Dict[PatternCategory, List[PatternInfo]] = {}
        for info, _ in self._entries.values():
            grouped.setdefault(info.category, []).append(info)
        return grouped

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[PatternInfo]:
        return (info for info, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


default_registry = PatternRegistry()


def register_pattern(key: str, title: str, category: PatternCategory, summary: str = "",
                     reference_url: str = "", interactive: bool = False,
                     uses_random: bool = False,
                     registry: Optional[PatternRegistry] = None) -> Callable[[Demo], Demo]:
    """Decorator adding a demo function to a registry (the default one if omitted)."""
    target = registry if registry is not None else default_registry

    def decorator(demo: Demo) -> Demo:
        info = PatternInfo(
            key=key,
            title=title,
            category=category,
            summary=summary,
            reference_url=reference_url,
            interactive=interactive,
            uses_random=uses_random,
        )
        return target.register(info, demo)

    return decorator
