"""Physics engine for N-body simulations."""

from nbody_sim.physics.body import Body, Trail
from nbody_sim.physics.engine import NBodyEngine
from nbody_sim.physics.errors import NonFiniteStateError, SimulationError
from nbody_sim.physics.policy import ANCHORED, UNCONSTRAINED, EnginePolicy, get_policy
from nbody_sim.physics.simulator import Simulator

__all__ = [
    "Body",
    "Trail",
    "NBodyEngine",
    "Simulator",
    "EnginePolicy",
    "UNCONSTRAINED",
    "ANCHORED",
    "get_policy",
    "SimulationError",
    "NonFiniteStateError",
]
