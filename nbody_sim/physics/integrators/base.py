"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
import numpy as np


class Integrator(ABC):
    """Abstract interface for split-step integrators.
    
    A tick is `step()` (before the force evaluation) followed by
    `complete_step()` (after it). Both update the arrays in place and only
    touch rows selected by the `movable` mask.
    """
    
    @abstractmethod
    def step(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        accelerations: np.ndarray,
        dt: float,
        movable: np.ndarray,
    ) -> None:
        """Advance state up to the point where new forces are needed.
        
        Args:
            positions: (n, 2) positions, updated in place
            velocities: (n, 2) velocities, updated in place
            accelerations: (n, 2) accelerations at the current positions
            dt: Time step
            movable: (n,) boolean mask of bodies the integrator may advance
        """
        pass
    
    @abstractmethod
    def complete_step(
        self,
        velocities: np.ndarray,
        accelerations: np.ndarray,
        dt: float,
        movable: np.ndarray,
    ) -> None:
        """Finish the tick using accelerations at the new positions."""
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
