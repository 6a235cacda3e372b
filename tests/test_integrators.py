"""Tests for the velocity Verlet integrator."""

import numpy as np
from nbody_sim.physics.integrators.verlet import VerletIntegrator


def test_verlet_integrator():
    """Test a full kick-drift-kick step with constant acceleration."""
    integrator = VerletIntegrator()

    positions = np.array([[0.0, 0.0]])
    velocities = np.array([[1.0, 0.0]])
    accelerations = np.array([[0.0, 2.0]])
    movable = np.array([True])
    dt = 0.1

    integrator.step(positions, velocities, accelerations, dt, movable)
    # x = x0 + v0 dt + a dt^2 / 2
    assert np.allclose(positions, [[0.1, 0.01]])
    assert np.allclose(velocities, [[1.0, 0.1]])

    integrator.complete_step(velocities, accelerations, dt, movable)
    assert np.allclose(velocities, [[1.0, 0.2]])

    assert integrator.name == "verlet"
    assert integrator.order == 2


def test_verlet_skips_immovable_rows():
    integrator = VerletIntegrator()

    positions = np.array([[0.0, 0.0], [5.0, 5.0]])
    velocities = np.array([[1.0, 1.0], [1.0, 1.0]])
    accelerations = np.array([[1.0, 1.0], [1.0, 1.0]])
    movable = np.array([True, False])

    integrator.step(positions, velocities, accelerations, 0.5, movable)
    integrator.complete_step(velocities, accelerations, 0.5, movable)

    assert np.allclose(positions[1], [5.0, 5.0])
    assert np.allclose(velocities[1], [1.0, 1.0])
    assert not np.allclose(positions[0], [0.0, 0.0])
