"""Frame driver: runs several engine micro-steps per rendered frame."""

import logging
import time
from typing import Callable, Iterable, Optional
from nbody_sim.physics.engine import NBodyEngine

logger = logging.getLogger(__name__)


class Simulator:
    """Main simulation controller.

    Each frame runs `substeps` engine updates of `dt * time_scale`; small
    fixed micro-steps keep close encounters stable.
    """

    def __init__(
        self,
        engine: NBodyEngine,
        dt: float = 0.008,
        substeps: int = 5,
        time_scale: float = 1.0,
    ):
        """Initialize simulator.

        Args:
            engine: Engine to drive
            dt: Micro-step length before time scaling
            substeps: Micro-steps per frame
            time_scale: Uniform multiplier applied to dt
        """
        if substeps < 1:
            raise ValueError(f"substeps must be at least 1, got {substeps}")
        self.engine = engine
        self.dt = dt
        self.substeps = substeps
        self.time_scale = time_scale
        self.time = 0.0
        self.frame_count = 0
        self.paused = False

        # Profiling: last frame timing (ms)
        self._last_frame_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_frame_callback: Optional[Callable] = None
        self.on_energy_callback: Optional[Callable] = None

    @property
    def micro_dt(self) -> float:
        return self.dt * self.time_scale

    def set_time_scale(self, time_scale: float):
        self.time_scale = float(time_scale)

    def set_profiling(self, enabled: bool = True):
        """Enable or disable frame timing."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last frame timing in ms."""
        return {"frame_ms": self._last_frame_ms}

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def reset(self, bodies: Iterable):
        """Replace the engine's bodies and rewind the clock."""
        self.engine.set_bodies(bodies)
        self.time = 0.0
        self.frame_count = 0

    def step_frame(self):
        """Advance one rendered frame (no-op while paused)."""
        if self.paused:
            return
        if self._profile:
            t0 = time.perf_counter()
        micro_dt = self.micro_dt
        for _ in range(self.substeps):
            self.engine.update(micro_dt)
            self.time += micro_dt
        self.frame_count += 1
        if self._profile:
            self._last_frame_ms = (time.perf_counter() - t0) * 1000.0

        if self.on_frame_callback:
            self.on_frame_callback(self)
        if self.on_energy_callback:
            self.on_energy_callback(self, self.engine.total_energy())

    def run(self, n_frames: int):
        """Run simulation for a number of frames.

        Args:
            n_frames: Number of frames to run
        """
        for _ in range(n_frames):
            if self.paused:
                logger.debug("Paused at frame %d", self.frame_count)
                return
            self.step_frame()

    def get_energy(self) -> float:
        """Get current total energy."""
        return self.engine.total_energy()
