"""Regression tests for diagnostics."""

import math
import numpy as np
from nbody_sim.physics.diagnostics import Diagnostics


def test_energies_raw_and_softened():
    """Test both pair potential conventions."""
    positions = np.array([[0.0, 0.0], [3.0, 0.0]])
    velocities = np.array([[0.0, 0.0], [0.0, 2.0]])
    masses = np.array([1.0, 1.0])

    K, U, E = Diagnostics(G=1.0, epsilon=4.0).compute_energies(positions, velocities, masses)
    assert math.isclose(K, 2.0)
    assert math.isclose(U, -1.0 / 3.0)
    assert math.isclose(E, K + U)

    _, U_soft, _ = Diagnostics(G=1.0, epsilon=4.0, soften_potential=True).compute_energies(
        positions, velocities, masses
    )
    assert math.isclose(U_soft, -0.2)


def test_coincident_pair_skipped_in_raw_potential():
    diagnostics = Diagnostics(G=1.0)
    positions = np.array([[0.0, 0.0], [0.0, 0.0], [2.0, 0.0]])
    masses = np.array([1.0, 1.0, 1.0])

    assert math.isclose(diagnostics.compute_potential_energy(positions, masses), -1.0)


def test_static_bodies_carry_no_kinetic_energy():
    diagnostics = Diagnostics()
    velocities = np.array([[3.0, 4.0], [1.0, 0.0]])
    masses = np.array([2.0, 2.0])

    assert math.isclose(diagnostics.compute_kinetic_energy(velocities, masses), 26.0)
    assert math.isclose(
        diagnostics.compute_kinetic_energy(velocities, masses, np.array([True, False])), 1.0
    )


def test_momentum_and_center_of_mass():
    diagnostics = Diagnostics()
    positions = np.array([[0.0, 0.0], [4.0, 0.0]])
    velocities = np.array([[0.0, 1.0], [0.0, -1.0]])
    masses = np.array([3.0, 1.0])

    assert np.allclose(diagnostics.compute_momentum(velocities, masses), [0.0, 2.0])
    assert np.allclose(diagnostics.compute_center_of_mass(positions, masses), [1.0, 0.0])
    assert np.allclose(diagnostics.compute_center_of_mass(positions, np.zeros(2)), [0.0, 0.0])
    assert math.isclose(
        diagnostics.compute_angular_momentum(positions, velocities, masses), -4.0
    )


def test_circular_orbit_is_virialized():
    """Test that a circular two-body orbit has Q ~ 1."""
    G, M, r = 1.0, 1000.0, 10.0
    positions = np.array([[0.0, 0.0], [r, 0.0]])
    velocities = np.array([[0.0, 0.0], [0.0, math.sqrt(G * M / r)]])
    masses = np.array([M, 1e-6])
    diagnostics = Diagnostics(G=G)

    Q = diagnostics.compute_virial_ratio(positions, velocities, masses)
    assert abs(Q - 1.0) < 1e-3
    assert diagnostics.compute_virial_ratio(positions[:1], velocities[:1], masses[:1]) == float('inf')
