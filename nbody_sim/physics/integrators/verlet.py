"""Velocity Verlet (leapfrog) integrator, symplectic and O(h^2)."""

import numpy as np
from nbody_sim.physics.integrators.base import Integrator


class VerletIntegrator(Integrator):
    """Velocity Verlet in kick-drift-kick form.
    
    1. v_half = v + a_old * dt/2
    2. x_new = x + v_half * dt
    3. (caller recomputes forces to get a_new)
    4. v_new = v_half + a_new * dt/2
    
    Steps 1-2 are `step()`, step 4 is `complete_step()`. This equals
    x_new = x + v*dt + 0.5*a_old*dt^2 and v_new = v + 0.5*(a_old + a_new)*dt.
    """
    
    @property
    def name(self) -> str:
        return "verlet"
    
    @property
    def order(self) -> int:
        return 2
    
    def step(self, positions, velocities, accelerations, dt: float, movable) -> None:
        """Half-kick then drift."""
        half_dt = 0.5 * dt
        velocities[movable] += accelerations[movable] * half_dt
        positions[movable] += velocities[movable] * dt
    
    def complete_step(self, velocities, accelerations, dt: float, movable) -> None:
        """Closing half-kick with the new accelerations."""
        velocities[movable] += accelerations[movable] * (0.5 * dt)
