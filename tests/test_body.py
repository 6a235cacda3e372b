"""Tests for body records and trails."""

import numpy as np
import pytest
from nbody_sim.physics.body import Body, Trail, as_vector, to_body


def test_as_vector_accepts_mapping_and_sequence():
    """Test vector coercion."""
    assert np.allclose(as_vector({"x": 1, "y": 2}), [1.0, 2.0])
    assert np.allclose(as_vector((3, 4)), [3.0, 4.0])
    with pytest.raises(ValueError):
        as_vector((1.0, 2.0, 3.0))


def test_trail_evicts_oldest():
    """Test that a full trail drops its oldest sample."""
    trail = Trail(capacity=3)
    for i in range(5):
        trail.append((i, 0))

    assert len(trail) == 3
    assert np.allclose(trail.to_array()[:, 0], [2, 3, 4])
    assert np.allclose(trail.latest, [4, 0])

    trail.clear()
    assert len(trail) == 0
    assert trail.latest is None


def test_trail_copy_with_smaller_capacity_keeps_newest():
    trail = Trail(capacity=5, points=[(i, i) for i in range(5)])
    smaller = trail.copy(capacity=2)

    assert smaller.capacity == 2
    assert np.allclose(smaller.to_array(), [[3, 3], [4, 4]])
    # Independent storage
    smaller.append((9, 9))
    assert len(trail) == 5


def test_trail_rejects_zero_capacity():
    with pytest.raises(ValueError):
        Trail(capacity=0)


def test_body_from_dict_accepts_camel_case():
    """Test that plain records with camelCase keys are understood."""
    body = Body.from_dict({
        "id": 7,
        "mass": 5,
        "position": {"x": 1, "y": 2},
        "velocity": [0, 3],
        "isStatic": True,
        "parentKey": "Sun",
        "orbitRadius": 42,
        "label": "Rock",
    })

    assert body.id == 7
    assert body.mass == 5.0
    assert np.allclose(body.position, [1, 2])
    assert np.allclose(body.velocity, [0, 3])
    assert np.allclose(body.acceleration, [0, 0])
    assert body.is_static
    assert body.parent_key == "Sun"
    assert body.orbit_radius == 42


def test_body_to_dict_round_trip():
    body = Body(id=1, mass=2.0, position=(1, 1), velocity=(0, 1), label="A",
                trail=[(0, 0), (1, 1)])
    record = body.to_dict()

    assert record["position"] == {"x": 1.0, "y": 1.0}
    assert record["trail"] == [{"x": 0.0, "y": 0.0}, {"x": 1.0, "y": 1.0}]

    restored = Body.from_dict(record)
    assert np.allclose(restored.velocity, body.velocity)
    assert len(restored.trail) == 2
    assert restored.label == "A"


def test_body_copy_is_deep():
    """Test that copies never share vectors or trails."""
    body = Body(id=1, mass=1.0, position=(0, 0), trail=[(0, 0)])
    clone = to_body(body)
    clone.position[0] = 10.0
    clone.trail.append((5, 5))

    assert clone is not body
    assert body.position[0] == 0.0
    assert len(body.trail) == 1
    assert body.speed == 0.0
