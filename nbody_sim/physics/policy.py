"""Engine policies: the behaviours that distinguish one engine variant from another."""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class EnginePolicy:
    """Configuration of a single engine variant.

    Attributes:
        name: Policy name
        recenter_frame: Pin the barycenter at the origin after every step
        resolve_collisions: Run overlap correction and impulses after the force pass
        trail_capacity: Samples kept per body trail
        soften_potential: Use the softened distance in the potential energy
        restitution: Coefficient of restitution for collisions
        collision_buffer: Gap added to the sum of radii when testing overlap
    """
    name: str
    recenter_frame: bool
    resolve_collisions: bool
    trail_capacity: int
    soften_potential: bool
    restitution: float = 0.6
    collision_buffer: float = 2.0


# Symmetric systems with no privileged body (e.g. the figure-eight)
UNCONSTRAINED = EnginePolicy(
    name="unconstrained",
    recenter_frame=True,
    resolve_collisions=False,
    trail_capacity=50,
    soften_potential=False,
)

# Systems dominated by a massive, possibly static, anchor body
ANCHORED = EnginePolicy(
    name="anchored",
    recenter_frame=False,
    resolve_collisions=True,
    trail_capacity=80,
    soften_potential=True,
)

_POLICIES: Dict[str, EnginePolicy] = {
    UNCONSTRAINED.name: UNCONSTRAINED,
    ANCHORED.name: ANCHORED,
}


def list_policies() -> List[str]:
    return list(_POLICIES.keys())


def get_policy(name: str) -> EnginePolicy:
    """Get a built-in policy by name.

    Raises:
        ValueError: If the policy is unknown
    """
    policy = _POLICIES.get(name.lower())
    if policy is None:
        raise ValueError(f"Unknown policy '{name}'. Available: {list_policies()}")
    return policy
