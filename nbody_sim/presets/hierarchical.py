"""Hierarchical preset: one massive, drifting primary with two satellites."""

from typing import List
from nbody_sim.physics.body import Body
from nbody_sim.presets.base import Preset


class HierarchicalSystem(Preset):
    """Massive primary with two counter-placed satellites.
    
    The primary drifts slowly, so the system is not recentered; it is run
    with the anchored policy (collisions on, no frame correction).
    """
    
    policy_name = "anchored"
    dt = 0.008
    substeps = 5
    
    def __init__(
        self,
        G: float = 100.0,
        primary_mass: float = 1000.0,
        satellite_mass: float = 20.0,
        orbit_radius: float = 200.0,
        satellite_speed: float = 22.0,
        drift: float = 0.5,
    ):
        """Initialize hierarchical preset.
        
        Args:
            G: Gravitational constant
            primary_mass: Mass of the central body
            satellite_mass: Mass of each satellite
            orbit_radius: Distance of both satellites from the primary
            satellite_speed: Tangential speed of the satellites
            drift: Slow x-velocity of the primary
        """
        super().__init__(G)
        self.primary_mass = primary_mass
        self.satellite_mass = satellite_mass
        self.orbit_radius = orbit_radius
        self.satellite_speed = satellite_speed
        self.drift = drift
    
    @property
    def name(self) -> str:
        return "hierarchical"
    
    def generate(self) -> List[Body]:
        r = self.orbit_radius
        v = self.satellite_speed
        return [
            Body(id=1, mass=self.primary_mass, position=(0.0, 0.0),
                 velocity=(self.drift, 0.0), radius=30.0, color="#FFD700",
                 label="Primary"),
            Body(id=2, mass=self.satellite_mass, position=(r, 0.0),
                 velocity=(0.0, v), radius=8.0, color="#00BFFF",
                 label="Satellite A", parent_key="Primary", orbit_radius=r),
            Body(id=3, mass=self.satellite_mass, position=(-r, 0.0),
                 velocity=(0.0, -v), radius=8.0, color="#FF6B6B",
                 label="Satellite B", parent_key="Primary", orbit_radius=r),
        ]
