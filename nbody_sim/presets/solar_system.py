"""Stylized solar system preset with a static sun and a nested moon."""

from typing import Dict, List, NamedTuple, Optional
from nbody_sim.physics.body import Body
from nbody_sim.presets.base import Preset
from nbody_sim.presets.utils import compose_orbit

SUN_MASS = 10000.0
EARTH_MASS = 10.0


class OrbitSpec(NamedTuple):
    label: str
    parent: Optional[str]
    orbit_radius: float
    mass: float
    radius: float
    color: str
    icon: Optional[str] = None
    note: Optional[str] = None


# Parents must precede their satellites
SOLAR_SYSTEM = (
    OrbitSpec("Sun", None, 0.0, SUN_MASS, 40.0, "#FFD700", icon="☀"),
    OrbitSpec("Mercury", "Sun", 60.0, 0.5, 4.0, "#A5A5A5"),
    OrbitSpec("Venus", "Sun", 110.0, 8.0, 7.0, "#E3BB76"),
    OrbitSpec("Earth", "Sun", 150.0, EARTH_MASS, 8.0, "#4B9CD3"),
    OrbitSpec("Moon", "Earth", 8.0, 0.1, 2.0, "#DDDDDD",
              note="Velocity is Earth's orbital velocity plus its own around Earth"),
    OrbitSpec("Mars", "Sun", 230.0, 1.0, 5.0, "#E27B58"),
    OrbitSpec("Jupiter", "Sun", 400.0, 3170.0, 20.0, "#C88B3A",
              note="Mass scaled down for stability"),
)


class SolarSystem(Preset):
    """Sun held static at the origin; planets on circular orbits around it.
    
    Satellites of planets get nested-orbit velocities: the parent's orbital
    velocity plus the satellite's circular velocity around the parent.
    Scale: 1 unit ~ 10^6 km, Earth = 10 mass units, G = 100.
    """
    
    policy_name = "anchored"
    dt = 0.008
    substeps = 5
    
    def __init__(self, G: float = 100.0, table=SOLAR_SYSTEM):
        super().__init__(G)
        self.table = table
    
    @property
    def name(self) -> str:
        return "solar_system"
    
    def generate(self) -> List[Body]:
        bodies: List[Body] = []
        by_label: Dict[str, Body] = {}
        for body_id, spec in enumerate(self.table, start=1):
            if spec.parent is None:
                position, velocity = (0.0, 0.0), (0.0, 0.0)
            else:
                parent = by_label[spec.parent]
                position, velocity = compose_orbit(parent, spec.orbit_radius, self.G)
            body = Body(
                id=body_id,
                mass=spec.mass,
                position=position,
                velocity=velocity,
                radius=spec.radius,
                color=spec.color,
                is_static=spec.parent is None,
                icon=spec.icon,
                label=spec.label,
                note=spec.note,
                parent_key=spec.parent,
                orbit_radius=spec.orbit_radius if spec.parent else None,
            )
            bodies.append(body)
            by_label[spec.label] = body
        return bodies
