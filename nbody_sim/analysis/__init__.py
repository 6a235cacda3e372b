"""Orbital analytics and reporting."""

from nbody_sim.analysis.orbits import (
    OrbitalInsight,
    detect_resonance,
    escape_velocity,
    find_resonance,
    orbital_insights,
)
from nbody_sim.analysis.report import MissionReport, build_report, save_report

__all__ = [
    "OrbitalInsight",
    "orbital_insights",
    "escape_velocity",
    "detect_resonance",
    "find_resonance",
    "MissionReport",
    "build_report",
    "save_report",
]
