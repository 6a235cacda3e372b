"""Numerical integrators for N-body simulations."""

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.verlet import VerletIntegrator

__all__ = ["Integrator", "VerletIntegrator"]
