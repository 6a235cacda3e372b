"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from nbody_sim.physics.body import Body
from nbody_sim.physics.engine import NBodyEngine
from nbody_sim.physics.policy import get_policy


class Preset(ABC):
    """Abstract base class for preset scenarios.
    
    Besides the initial bodies, a preset recommends the engine policy and
    the frame timing it was tuned for.
    """
    
    policy_name = "unconstrained"
    dt = 0.008
    substeps = 5
    softening = 5.0
    
    def __init__(self, G: float = 100.0):
        """Initialize preset.
        
        Args:
            G: Gravitational constant used to derive orbital velocities
        """
        self.G = G
    
    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.
        
        Returns:
            List of new Body objects
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
    
    def make_engine(self, **engine_kwargs) -> NBodyEngine:
        """Build an engine loaded with this preset and its recommended policy."""
        engine_kwargs.setdefault("policy", get_policy(self.policy_name))
        engine_kwargs.setdefault("G", self.G)
        engine_kwargs.setdefault("softening", self.softening)
        return NBodyEngine(self.generate(), **engine_kwargs)
