"""Overlap correction and impulse response between bodies.

Pairs are visited in index order (i < j) and corrected in place, so a pair
sees the corrections already applied to earlier pairs in the same pass.
"""

import logging
import math
import numpy as np

logger = logging.getLogger(__name__)


class CollisionResolver:
    """Push overlapping bodies apart and damp their approach velocity."""

    def __init__(self, restitution: float = 0.6, buffer: float = 2.0):
        """Initialize resolver.

        Args:
            restitution: Coefficient of restitution (0 inelastic, 1 elastic)
            buffer: Extra gap added to the sum of radii
        """
        self.restitution = float(restitution)
        self.buffer = float(buffer)

    def resolve(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        masses: np.ndarray,
        radii: np.ndarray,
        is_static: np.ndarray,
    ) -> int:
        """Resolve every overlapping pair once.

        Args:
            positions: (n, 2) positions, updated in place
            velocities: (n, 2) velocities, updated in place
            masses: (n,) masses
            radii: (n,) radii
            is_static: (n,) boolean mask of immovable bodies

        Returns:
            Number of overlapping pairs handled
        """
        n = positions.shape[0]
        contacts = 0
        for i in range(n):
            for j in range(i + 1, n):
                if self._resolve_pair(i, j, positions, velocities, masses, radii, is_static):
                    contacts += 1
        if contacts:
            logger.debug("Resolved %d overlapping pair(s)", contacts)
        return contacts

    def _resolve_pair(self, i, j, positions, velocities, masses, radii, is_static) -> bool:
        static_a = bool(is_static[i])
        static_b = bool(is_static[j])
        dx = positions[j, 0] - positions[i, 0]
        dy = positions[j, 1] - positions[i, 1]
        distance = math.hypot(dx, dy)
        min_distance = radii[i] + radii[j] + self.buffer

        # Exactly coincident bodies have no normal; they are left alone
        if not 0 < distance < min_distance:
            return False
        if static_a and static_b:
            return True

        overlap = min_distance - distance
        normal = np.array([dx / distance, dy / distance])
        mass_a = masses[i]
        mass_b = masses[j]

        if static_a:
            positions[j] += normal * overlap
        elif static_b:
            positions[i] -= normal * overlap
        else:
            # Each body moves by the other's share of the mass
            total_mass = mass_a + mass_b
            positions[i] -= normal * (overlap * mass_b / total_mass)
            positions[j] += normal * (overlap * mass_a / total_mass)

        relative_velocity = float(np.dot(velocities[j] - velocities[i], normal))
        if relative_velocity >= 0:
            return True

        e = self.restitution
        if static_a:
            # Static body acts as infinite mass
            velocities[j] += normal * (-(1 + e) * relative_velocity)
        elif static_b:
            velocities[i] -= normal * (-(1 + e) * relative_velocity)
        else:
            impulse = -(1 + e) * relative_velocity / (1 / mass_a + 1 / mass_b)
            velocities[i] -= normal * (impulse / mass_a)
            velocities[j] += normal * (impulse / mass_b)
        return True
