"""
N-body Simulator - an interactive 2D gravitational N-body engine.

Features:
- Softened all-pairs gravity with velocity-Verlet integration
- Unconstrained (recentered) and anchored (static bodies, collisions) policies
- Bounded per-body trails and energy diagnostics
- Preset scenarios (figure-eight, hierarchical, solar system)
- Orbital analytics, 2D rendering and a CLI
"""

__version__ = "0.1.0"

from nbody_sim.physics.body import Body
from nbody_sim.physics.engine import NBodyEngine
from nbody_sim.physics.policy import ANCHORED, UNCONSTRAINED, get_policy
from nbody_sim.physics.simulator import Simulator

__all__ = [
    "Body",
    "NBodyEngine",
    "Simulator",
    "UNCONSTRAINED",
    "ANCHORED",
    "get_policy",
]
