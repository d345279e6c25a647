"""
scheduler.py: Fixed-timestep driver that turns elapsed wall time into ticks and spawns.
"""

from .physics_engine import SimulationEngine

# Time is accumulated in (milliseconds x tick rate) so that a tick costs
# exactly TICK_UNITS and a spawn exactly spawn_interval_ms * tick_rate.
TICK_UNITS = 1000


class Scheduler:
    """
    Owns the clock for one SimulationEngine.

    Both timers run only while the engine is playing. When the game ends they
    are stopped and cleared, so after a restart the first spawn comes a full
    spawn interval later.
    """

    def __init__(self, engine: SimulationEngine, max_elapsed_ms: int = 250):
        self.engine = engine
        self.max_elapsed_ms = max_elapsed_ms
        self._spawn_units = engine.config.spawn_interval_ms * engine.config.tick_rate
        self._since_tick = 0
        self._since_spawn = 0

    def reset(self):
        self._since_tick = 0
        self._since_spawn = 0

    def advance(self, elapsed_ms: int) -> int:
        """
        Runs every tick and spawn that falls due within ``elapsed_ms``, in time
        order (a spawn due at the same instant as a tick goes first).
        Returns the number of ticks run.
        """
        if not self.engine.is_running:
            self.reset()
            return 0

        # Clamp stalls (window dragged, debugger paused...)
        elapsed_ms = min(max(int(elapsed_ms), 0), self.max_elapsed_ms)
        pending = elapsed_ms * self.engine.config.tick_rate
        ticks = 0

        while True:
            to_tick = TICK_UNITS - self._since_tick
            to_spawn = self._spawn_units - self._since_spawn
            step = min(to_tick, to_spawn)
            if step > pending:
                break

            pending -= step
            self._since_tick += step
            self._since_spawn += step

            if self._since_spawn >= self._spawn_units:
                self._since_spawn = 0
                self.engine.spawn_obstacle_pair()

            if self._since_tick >= TICK_UNITS:
                self._since_tick = 0
                self.engine.tick()
                ticks += 1

            if not self.engine.is_running:
                self.reset()
                return ticks

        self._since_tick += pending
        self._since_spawn += pending
        return ticks
