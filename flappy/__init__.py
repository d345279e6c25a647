"""Flappy Bird: deterministic simulation core and a pygame client."""

from .constants import GameConfig
from .data_models import Bird, Box, GameState, PipePair, Snapshot
from .physics_core import PhysicsCore
from .physics_engine import SimulationEngine
from .scheduler import Scheduler
from .spawner import ObstacleSpawner

__all__ = [
    "GameConfig",
    "Box",
    "Bird",
    "PipePair",
    "GameState",
    "Snapshot",
    "PhysicsCore",
    "SimulationEngine",
    "ObstacleSpawner",
    "Scheduler",
]
