import os

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from flappy.constants import GameConfig
from flappy.physics_engine import SimulationEngine
from flappy.spawner import ObstacleSpawner


class FixedRandom:
    """Stands in for random.Random, always returning the same draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def make_engine():
    """Engine whose pipe gaps are all at the same height (draw=0.5 puts the gap at y 256..416)."""
    def _make(draw=0.5, **overrides):
        config = GameConfig(**overrides)
        return SimulationEngine(config, ObstacleSpawner(config, rng=FixedRandom(draw)))
    return _make
