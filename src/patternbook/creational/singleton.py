# src/patternbook/creational/singleton.py
"""
Singleton: a class has only one instance and a global point of access to it.

The instance is created lazily on first access and returned forever after.
Two flavours are shown: a metaclass that makes any class a singleton, and a
class with a lock-guarded accessor that refuses direct construction.
"""

import logging
import threading

from ..enums import PatternCategory
from ..registry import register_pattern


logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """Metaclass caching one instance per class."""

    _instances = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls):
        """Forget the cached instance of this class."""
        with cls._lock:
            cls._instances.pop(cls, None)


class StringSingleton(metaclass=SingletonMeta):
    """Singleton that simply stores a single string."""

    def __init__(self):
        self._string = ""

    @classmethod
    def instance(cls) -> "StringSingleton":
        return cls()

    def get_string(self) -> str:
        return self._string

    def set_string(self, new_str: str):
        self._string = new_str

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


class Singleton:
    """Lazily created on the first get_instance() call; cannot be built directly."""

    _lock = threading.Lock()
    _instance = None
    _creating = False

    def __init__(self, a: int):
        if not Singleton._creating:
            raise TypeError("Singleton cannot be instantiated directly, use get_instance()")
        self._a = a
        print(f"Singleton Constructor: value {a}")

    @classmethod
    def get_instance(cls) -> "Singleton":
        with cls._lock:
            print("Singleton GetInstance()")
            if cls._instance is None:
                cls._creating = True
                try:
                    cls._instance = cls(1)
                finally:
                    cls._creating = False
                logger.debug("Singleton instance created")
            return cls._instance

    @classmethod
    def reset(cls):
        """Drop the instance so the next access creates a fresh one."""
        with cls._lock:
            cls._instance = None

    def get_a(self) -> int:
        return self._a

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


@register_pattern(
    "singleton", "Singleton", PatternCategory.CREATIONAL,
    summary="Lazily create one instance behind a locked accessor.",
    reference_url="https://en.wikipedia.org/wiki/Singleton_pattern",
)
def singleton_demo():
    singleton = Singleton.get_instance()
    print(f"The value of the singleton: {singleton.get_a()}")


@register_pattern(
    "string_singleton", "Singleton (metaclass)", PatternCategory.CREATIONAL,
    summary="Every call returns the same string holder.",
    reference_url="https://en.wikipedia.org/wiki/Singleton_pattern",
)
def string_singleton_demo():
    StringSingleton.instance().set_string("Hello from the only instance")
    other = StringSingleton.instance()
    print(f"Same instance: {other is StringSingleton.instance()}")
    print(f"Stored string: {other.get_string()}")
