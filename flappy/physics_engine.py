"""
physics_engine.py: The authoritative world simulation and its state machine.
"""

from typing import List, Optional

from .constants import GameConfig
from .data_models import GameState, PipePair, Snapshot
from .physics_core import PhysicsCore
from .spawner import ObstacleSpawner


class SimulationEngine(PhysicsCore):
    """
    Owns the bird, the pipes, the score and the game state.
    Inherits the shared physics and collision rules from PhysicsCore.

    Driven from outside: ``tick()`` at the tick rate, ``spawn_obstacle_pair()``
    on the spawn timer, ``on_jump_pressed()`` on input.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 spawner: Optional[ObstacleSpawner] = None):
        super().__init__(config)
        self.spawner = spawner or ObstacleSpawner(self.config)
        self.bird = self.spawn_bird()
        self.pipes: List[PipePair] = []
        self.score = 0.0
        self.state = GameState.PLAYING
        self.tick_count = 0

    @property
    def is_running(self) -> bool:
        return self.state is GameState.PLAYING

    def tick(self):
        """
        Advances the world by one fixed step. Does nothing once the game is over.

        A collision latches game over but the remaining pipes are still moved
        and scored for this tick.
        """
        if not self.is_running:
            return

        self.tick_count += 1
        game_over = False

        # 1. Bird
        self.apply_gravity_and_movement(self.bird)

        # 2. Pipes: move, score, collide
        for pipe in self.pipes:
            pipe.advance(self.config.pipe_velocity_x)

            if not pipe.is_passed() and self.has_passed(self.bird, pipe):
                self.score += self.config.pass_score
                pipe.mark_passed()

            if self.check_collision(self.bird, pipe):
                game_over = True

        # 3. Retire pipes that left the board
        self.pipes = [p for p in self.pipes if not p.is_offscreen()]

        # 4. Floor
        if self.is_out_of_bounds(self.bird):
            game_over = True

        if game_over:
            self.state = GameState.GAME_OVER

    def on_jump_pressed(self):
        """A jump restarts a finished game, and the new bird gets the impulse."""
        if not self.is_running:
            self.restart()
        self.flap(self.bird)

    def spawn_obstacle_pair(self):
        # Spawn timer is stopped while the game is over
        if not self.is_running:
            return
        self.pipes.append(self.spawner.spawn())

    def restart(self):
        self.bird = self.spawn_bird()
        self.pipes.clear()
        self.score = 0.0
        self.state = GameState.PLAYING
        self.tick_count = 0

    def get_snapshot(self) -> Snapshot:
        return Snapshot(
            bird=self.bird.box.copy(),
            pipes=tuple(box.copy() for pipe in self.pipes for box in pipe.boxes),
            state=self.state,
            raw_score=self.score,
            tick_count=self.tick_count,
        )
