# tests/conftest.py
"""
Pytest configuration and fixtures for patternbook tests.
"""

import random

import pytest

from patternbook.creational.singleton import Singleton, StringSingleton


@pytest.fixture(autouse=True)
def reset_singletons():
    """Start and finish every test without cached singleton instances."""
    Singleton.reset()
    StringSingleton.reset()

    yield

    Singleton.reset()
    StringSingleton.reset()


@pytest.fixture
def rng():
    """Seeded random source for demos that roll dice."""
    return random.Random(1234)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "creational: Creational pattern tests"
    )
    config.addinivalue_line(
        "markers", "structural: Structural pattern tests"
    )
    config.addinivalue_line(
        "markers", "behavioral: Behavioral pattern tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
