"""Pytest configuration and fixtures for the genetics and food-web tests."""

import random

import pytest

from ecosse.events import RecordingSink
from ecosse.foodweb import TrophicLevel, TrophicRegistry


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def sink():
    """Collect every notification the core emits."""
    return RecordingSink()


@pytest.fixture
def simple_registry():
    """plant <- herbivore <- wolf, with nothing else registered."""
    registry = TrophicRegistry()
    registry.register_type("plant", TrophicLevel.PRODUCER)
    registry.register_type("herbivore", TrophicLevel.PRIMARY, ["plant"])
    registry.register_type("wolf", TrophicLevel.SECONDARY, ["herbivore"])
    return registry
