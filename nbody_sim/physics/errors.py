"""Exceptions raised by the physics engine."""

from typing import Sequence


class SimulationError(Exception):
    """Base class for errors reported by the simulation engine."""


class NonFiniteStateError(SimulationError):
    """Raised when a step leaves a position or velocity NaN or infinite.
    
    The state is already corrupted when this is raised; callers should reset
    the engine rather than keep stepping it.
    """
    
    kind = "non-finite state"
    
    def __init__(self, body_ids: Sequence, step: int):
        self.body_ids = list(body_ids)
        self.step = step
        super().__init__(
            f"{self.kind} after step {step} for bodies {self.body_ids}"
        )
