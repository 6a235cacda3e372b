"""Utility functions for building orbital initial conditions."""

import math
from typing import Optional, Tuple
import numpy as np
from nbody_sim.physics.body import Body


def circular_velocity(G: float, mass: float, r: float) -> float:
    """Speed of a circular orbit around a point mass.
    
    v_circ = sqrt(G * M / r)
    
    Args:
        G: Gravitational constant
        mass: Central mass
        r: Orbital radius
        
    Returns:
        Circular velocity
    """
    return math.sqrt(G * mass / r)


def compose_orbit(
    parent: Body,
    r_local: float,
    G: float,
    angle: float = 0.0,
    clockwise: bool = False,
) -> Tuple[np.ndarray, np.ndarray]:
    """Place a satellite on a circular orbit around a (possibly moving) parent.
    
    The satellite's velocity is the parent's velocity plus its own circular
    velocity relative to the parent: v = v_parent + sqrt(G * M_parent / r_local).
    
    Args:
        parent: Parent body (its velocity must already be set)
        r_local: Distance from the parent
        G: Gravitational constant
        angle: Polar angle of the satellite around the parent (radians)
        clockwise: Orbit direction
        
    Returns:
        Tuple of (position, velocity)
    """
    radial = np.array([math.cos(angle), math.sin(angle)])
    tangent = np.array([-radial[1], radial[0]])
    if clockwise:
        tangent = -tangent
    v_local = circular_velocity(G, parent.mass, r_local)
    position = parent.position + r_local * radial
    velocity = parent.velocity + v_local * tangent
    return position, velocity


def orbital_period(G: float, mass: float, semi_major_axis: float) -> float:
    """Kepler period T = 2π * sqrt(a^3 / (G * M))."""
    return 2 * math.pi * math.sqrt(semi_major_axis ** 3 / (G * mass))


def make_probe(
    origin: Body,
    speed: float,
    angle: float = 0.0,
    mass: float = 0.01,
    radius: float = 2.0,
    clearance: float = 3.0,
    body_id: Optional[int] = None,
    color: str = "#39FF14",
) -> Body:
    """Build a probe launched from the surface of `origin`.
    
    The probe starts just outside the origin body (so it does not register
    as a collision) and inherits the origin's velocity plus `speed` along
    the launch direction.
    
    Args:
        origin: Launch body
        speed: Launch speed relative to the origin body
        angle: Launch direction (radians)
        mass: Probe mass
        radius: Probe radius
        clearance: Gap between the surfaces at launch
        body_id: Optional id (the engine assigns one when None)
        color: Display color
        
    Returns:
        New probe Body
    """
    direction = np.array([math.cos(angle), math.sin(angle)])
    offset = origin.radius + radius + clearance
    return Body(
        id=body_id,
        mass=mass,
        position=origin.position + offset * direction,
        velocity=origin.velocity + speed * direction,
        radius=radius,
        color=color,
        label="Probe",
        note=f"Launched from {origin.label or origin.id}",
    )
