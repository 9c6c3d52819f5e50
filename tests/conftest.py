"""Pytest configuration and fixtures for game engine tests."""

import random

import pytest

from flappy.constants import GameConfig
from flappy.game_engine import GameEngine


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def engine():
    """A fresh engine in the menu state with a fixed seed."""
    return GameEngine(config=GameConfig(seed=42))


@pytest.fixture
def playing_engine(engine):
    """An engine that has just left the menu."""
    engine.activate()
    return engine


@pytest.fixture
def hold_bird():
    """Pin the bird in mid-air so a test can tick without hitting the ground."""

    def _hold(engine, y=None):
        engine.bird.y = engine.config.bird_start_y if y is None else y
        engine.bird.velocity = 0.0

    return _hold
