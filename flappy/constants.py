"""
constants.py: Centralized configuration for the board, physics and timing.
"""

from dataclasses import dataclass

# -------- Board Config --------
BOARD_WIDTH = 360
BOARD_HEIGHT = 640

# -------- Bird Config --------
BIRD_WIDTH = 34
BIRD_HEIGHT = 24

# -------- Pipe Config --------
PIPE_WIDTH = 64
PIPE_HEIGHT = 512
PIPE_VELOCITY_X = -4              # Horizontal speed (pixels/tick)

# -------- Physics Config (Pixels / Tick / Tick) --------
GRAVITY = 1
JUMP_IMPULSE = -9                 # Velocity set by a jump (pixels/tick)

# -------- Timing Config --------
TICK_RATE = 60                    # Simulation ticks per second
SPAWN_INTERVAL_MS = 1500          # A new pipe pair every 1.5 seconds

# -------- Scoring --------
PASS_SCORE = 0.5                  # Added once per pipe pair passed


@dataclass(frozen=True)
class GameConfig:
    """Immutable game settings, fixed when the engine is constructed."""

    board_width: int = BOARD_WIDTH
    board_height: int = BOARD_HEIGHT
    bird_width: int = BIRD_WIDTH
    bird_height: int = BIRD_HEIGHT
    pipe_width: int = PIPE_WIDTH
    pipe_height: int = PIPE_HEIGHT
    pipe_velocity_x: int = PIPE_VELOCITY_X
    gravity: int = GRAVITY
    jump_impulse: int = JUMP_IMPULSE
    tick_rate: int = TICK_RATE
    spawn_interval_ms: int = SPAWN_INTERVAL_MS
    pass_score: float = PASS_SCORE

    def __post_init__(self):
        sizes = {
            "board_width": self.board_width,
            "board_height": self.board_height,
            "bird_width": self.bird_width,
            "bird_height": self.bird_height,
            "pipe_width": self.pipe_width,
            "pipe_height": self.pipe_height,
            "tick_rate": self.tick_rate,
            "spawn_interval_ms": self.spawn_interval_ms,
        }
        for name, value in sizes.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    @property
    def pipe_opening(self) -> int:
        return self.board_height // 4

    @property
    def bird_start_x(self) -> int:
        return self.board_width // 8

    @property
    def bird_start_y(self) -> int:
        return self.board_height // 2

    @property
    def spawn_interval(self) -> float:
        """Spawn interval in seconds."""
        return self.spawn_interval_ms / 1000.0
