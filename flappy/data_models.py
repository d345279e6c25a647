"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

import pygame


@dataclass
class Box:
    """Axis-aligned box covering [x, x+width) x [y, y+height)."""
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Box size must be positive, got {self.width}x{self.height}")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def intersects(self, other: "Box") -> bool:
        """True when both boxes share a region of nonzero area. Touching edges don't count."""
        return self.rect.colliderect(other.rect)

    def copy(self) -> "Box":
        return Box(self.x, self.y, self.width, self.height)


@dataclass
class Bird:
    """The avatar: a box falling under gravity with an integer velocity."""
    box: Box
    velocity: int = 0

    @property
    def x(self) -> int:
        return self.box.x

    @property
    def y(self) -> int:
        return self.box.y

    def advance(self, gravity: int):
        """Integrates one tick of motion. The bird never leaves through the top."""
        self.velocity += gravity
        self.box.y += self.velocity
        self.box.y = max(self.box.y, 0)

    def jump(self, impulse: int):
        self.velocity = impulse


@dataclass
class PipePair:
    """Top and bottom pipe sharing one x coordinate and one pass flag."""
    top: Box
    bottom: Box
    passed: bool = False

    @property
    def x(self) -> int:
        return self.top.x

    @property
    def width(self) -> int:
        return self.top.width

    @property
    def right(self) -> int:
        return self.top.right

    @property
    def boxes(self) -> Tuple[Box, Box]:
        return self.top, self.bottom

    def advance(self, velocity_x: int):
        self.top.x += velocity_x
        self.bottom.x += velocity_x

    def is_passed(self) -> bool:
        return self.passed

    def mark_passed(self):
        self.passed = True

    def is_offscreen(self) -> bool:
        return self.right < 0


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to the presentation layer."""
    bird: Box
    pipes: Tuple[Box, ...] = field(default_factory=tuple)
    state: GameState = GameState.PLAYING
    raw_score: float = 0.0
    tick_count: int = 0

    @property
    def score(self) -> int:
        """Score as displayed: truncated to an int."""
        return int(self.raw_score)

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER
