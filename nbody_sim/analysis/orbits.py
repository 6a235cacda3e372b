"""Orbital analytics derived from a body snapshot."""

import math
from dataclasses import asdict, dataclass
from fractions import Fraction
from typing import Dict, Iterable, List, Optional
import numpy as np
from nbody_sim.physics.body import Body


@dataclass
class OrbitalInsight:
    """Circular-orbit summary of one satellite.
    
    velocity and period are the nominal circular values for orbit_radius;
    distance is the measured separation from the parent right now.
    """
    body_id: int
    label: str
    parent: str
    orbit_radius: float
    velocity: float
    period: float
    distance: float
    
    def to_dict(self) -> Dict:
        return asdict(self)


def orbital_insights(bodies: Iterable[Body], G: float) -> List[OrbitalInsight]:
    """Summarize every body that declares a parent and an orbit radius.
    
    Parents are matched by label; satellites whose parent is missing are
    skipped.
    
    Args:
        bodies: Body snapshot (e.g. engine.bodies)
        G: Gravitational constant
        
    Returns:
        One insight per satellite, in body order
    """
    bodies = list(bodies)
    by_label = {body.label: body for body in bodies if body.label}
    insights = []
    for body in bodies:
        if not body.parent_key or not body.orbit_radius:
            continue
        parent = by_label.get(body.parent_key)
        if parent is None:
            continue
        r = body.orbit_radius
        velocity = math.sqrt(G * parent.mass / r)
        insights.append(OrbitalInsight(
            body_id=body.id,
            label=body.label or str(body.id),
            parent=parent.label,
            orbit_radius=r,
            velocity=velocity,
            period=2 * math.pi * r / velocity,
            distance=float(np.linalg.norm(body.position - parent.position)),
        ))
    return insights


def escape_velocity(G: float, mass: float, radius: float) -> float:
    """Escape velocity from the surface of a body: sqrt(2 * G * M / R)."""
    return math.sqrt(2 * G * mass / radius)


def detect_resonance(
    period_a: float,
    period_b: float,
    max_denominator: int = 5,
    tolerance: float = 0.05,
) -> Optional[str]:
    """Find a small-integer period ratio (longer:shorter) such as '2:1'.
    
    Args:
        period_a: First orbital period
        period_b: Second orbital period
        max_denominator: Largest integer allowed in the ratio
        tolerance: Allowed relative error between the ratio and the periods
        
    Returns:
        Ratio string, or None if no small ratio is close enough
    """
    if period_a <= 0 or period_b <= 0:
        return None
    ratio = max(period_a, period_b) / min(period_a, period_b)
    fraction = Fraction(ratio).limit_denominator(max_denominator)
    if abs(float(fraction) - ratio) / ratio > tolerance:
        return None
    return f"{fraction.numerator}:{fraction.denominator}"


def find_resonance(insights: List[OrbitalInsight], **kwargs) -> Optional[str]:
    """Describe the first near-resonant pair of neighbouring siblings.
    
    Siblings (same parent) are compared in order of orbit radius.
    """
    by_parent: Dict[str, List[OrbitalInsight]] = {}
    for insight in insights:
        by_parent.setdefault(insight.parent, []).append(insight)
    for siblings in by_parent.values():
        siblings = sorted(siblings, key=lambda s: s.orbit_radius)
        for inner, outer in zip(siblings, siblings[1:]):
            ratio = detect_resonance(inner.period, outer.period, **kwargs)
            if ratio is not None:
                return f"{outer.label}:{inner.label} period ratio ≈ {ratio}"
    return None
