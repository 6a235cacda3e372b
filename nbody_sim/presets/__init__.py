"""Preset scenario generators for N-body simulations."""

from typing import List
from nbody_sim.presets.base import Preset
from nbody_sim.presets.classic import FigureEight, RandomThreeBody
from nbody_sim.presets.hierarchical import HierarchicalSystem
from nbody_sim.presets.solar_system import SolarSystem

_PRESETS = {
    "figure8": FigureEight,
    "random": RandomThreeBody,
    "hierarchical": HierarchicalSystem,
    "solar_system": SolarSystem,
}


def list_presets() -> List[str]:
    return list(_PRESETS.keys())


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = _PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "FigureEight",
    "RandomThreeBody",
    "HierarchicalSystem",
    "SolarSystem",
    "get_preset",
    "list_presets",
]
