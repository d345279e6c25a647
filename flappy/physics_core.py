"""
physics_core.py: The shared, deterministic kinematic rules and collision logic.
"""

from typing import Optional

from .constants import GameConfig
from .data_models import Bird, Box, PipePair


class PhysicsCore:
    """
    Deterministic rules shared by the simulation engine and its tests.
    Holds no mutable game state of its own.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def spawn_bird(self) -> Bird:
        """A fresh bird at the starting position, at rest."""
        cfg = self.config
        return Bird(Box(cfg.bird_start_x, cfg.bird_start_y, cfg.bird_width, cfg.bird_height))

    def apply_gravity_and_movement(self, bird: Bird):
        bird.advance(self.config.gravity)

    def flap(self, bird: Bird):
        bird.jump(self.config.jump_impulse)

    def has_passed(self, bird: Bird, pipe: PipePair) -> bool:
        """True once the bird's left edge is strictly past the pair's right edge."""
        return bird.x > pipe.right

    def check_collision(self, bird: Bird, pipe: PipePair) -> bool:
        """Top and bottom pipes are separate hazards."""
        return any(bird.box.intersects(box) for box in pipe.boxes)

    def is_out_of_bounds(self, bird: Bird) -> bool:
        # The top is clamped in Bird.advance, only the floor can be crossed
        return bird.y > self.config.board_height
