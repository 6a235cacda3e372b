"""Tests for preset scenarios."""

import math
import numpy as np
import pytest
from nbody_sim.physics.policy import ANCHORED, UNCONSTRAINED
from nbody_sim.presets import (
    FigureEight,
    HierarchicalSystem,
    RandomThreeBody,
    SolarSystem,
    get_preset,
    list_presets,
)
from nbody_sim.presets.utils import circular_velocity, compose_orbit, make_probe, orbital_period


def test_preset_registry():
    """Test lookup by name."""
    assert list_presets() == ["figure8", "random", "hierarchical", "solar_system"]
    assert isinstance(get_preset("figure8"), FigureEight)
    assert isinstance(get_preset("Solar_System"), SolarSystem)
    assert get_preset("hierarchical", primary_mass=500.0).primary_mass == 500.0
    with pytest.raises(ValueError):
        get_preset("galaxy")


def test_figure_eight():
    """Test figure-eight initial data."""
    preset = FigureEight()
    bodies = preset.generate()

    assert preset.name == "figure8"
    assert len(bodies) == 3
    # Zero net momentum and centroid at the origin
    momentum = sum(b.mass * b.velocity for b in bodies)
    centroid = sum(b.mass * b.position for b in bodies)
    assert np.allclose(momentum, 0.0)
    assert np.allclose(centroid, 0.0)
    assert math.isclose(preset.G * preset.mass / 100.0, 1.0)


def test_presets_recommend_policies():
    assert FigureEight().make_engine().policy is UNCONSTRAINED
    assert RandomThreeBody().make_engine().policy is UNCONSTRAINED
    assert HierarchicalSystem().make_engine().policy is ANCHORED
    assert SolarSystem().make_engine().policy is ANCHORED
    assert SolarSystem().make_engine(policy=UNCONSTRAINED).policy is UNCONSTRAINED


def test_hierarchical_system():
    bodies = HierarchicalSystem().generate()

    assert [b.label for b in bodies] == ["Primary", "Satellite A", "Satellite B"]
    assert np.allclose(bodies[0].velocity, [0.5, 0.0])
    assert all(b.parent_key == "Primary" for b in bodies[1:])
    assert not any(b.is_static for b in bodies)


def test_solar_system_nested_orbits():
    """Test that the moon inherits its planet's orbital velocity."""
    bodies = {b.label: b for b in SolarSystem().generate()}

    sun = bodies["Sun"]
    earth = bodies["Earth"]
    moon = bodies["Moon"]

    assert sun.is_static
    assert np.allclose(sun.position, [0.0, 0.0])
    assert np.allclose(earth.position, [150.0, 0.0])
    assert math.isclose(earth.velocity[1], math.sqrt(100.0 * 10000.0 / 150.0))
    assert np.allclose(moon.position, [158.0, 0.0])
    assert math.isclose(moon.velocity[1], earth.velocity[1] + math.sqrt(100.0 * 10.0 / 8.0))
    assert moon.parent_key == "Earth"
    assert len({b.id for b in bodies.values()}) == len(bodies)


def test_orbit_helpers():
    assert math.isclose(circular_velocity(100.0, 1000.0, 10.0), 100.0)
    assert math.isclose(orbital_period(1.0, 1.0, 1.0), 2 * math.pi)

    parent = SolarSystem().generate()[3]  # Earth
    position, velocity = compose_orbit(parent, 10.0, 100.0, angle=math.pi / 2, clockwise=True)
    assert np.allclose(position, parent.position + [0.0, 10.0])
    assert np.allclose(velocity, parent.velocity + [10.0, 0.0])


def test_make_probe_starts_clear_of_origin():
    earth = SolarSystem().generate()[3]
    probe = make_probe(earth, speed=40.0, angle=math.pi / 2)

    gap = np.linalg.norm(probe.position - earth.position) - earth.radius - probe.radius
    assert math.isclose(gap, 3.0)
    assert np.allclose(probe.velocity - earth.velocity, [0.0, 40.0])
    assert probe.label == "Probe"
    assert probe.id is None
