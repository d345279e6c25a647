"""
spawner.py: Generates pipe pairs with a randomized gap position.
"""

import random
from typing import Optional

from .constants import GameConfig
from .data_models import Box, PipePair


class ObstacleSpawner:
    """
    Builds pipe pairs just beyond the right edge of the board.

    The random source is injectable so runs can be replayed: pass a seeded
    ``random.Random`` (or anything with a ``random()`` method), or just a seed.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(seed)

    def gap_offset(self) -> int:
        """Y of the top pipe: -h/4 shifted up by a uniform amount in [0, h/2)."""
        height = self.config.pipe_height
        return -(height // 4) - int(self.rng.random() * (height // 2))

    def spawn(self) -> PipePair:
        cfg = self.config
        random_y = self.gap_offset()
        top = Box(cfg.board_width, random_y, cfg.pipe_width, cfg.pipe_height)
        bottom = Box(cfg.board_width, random_y + cfg.pipe_height + cfg.pipe_opening,
                     cfg.pipe_width, cfg.pipe_height)
        return PipePair(top=top, bottom=bottom)
