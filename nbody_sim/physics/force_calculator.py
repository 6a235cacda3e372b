"""Softened pairwise gravitational acceleration.

For body i and every other body j, with d = x_j - x_i:

    a_i += G * m_j * d / (|d|^2 + eps^2)^(3/2)

Accelerations are recomputed from scratch on every call; nothing is
accumulated between calls.
"""

from typing import Literal
import numpy as np


class ForceCalculator:
    """All-pairs (O(n^2)) softened gravity."""

    def __init__(self, method: Literal["vectorized", "direct"] = "vectorized"):
        """Initialize force calculator.

        Args:
            method: 'vectorized' (numpy broadcasting) or 'direct' (explicit loop)
        """
        if method not in ("vectorized", "direct"):
            raise ValueError(f"Unknown force method '{method}'. Use 'vectorized' or 'direct'")
        self.method = method

    def compute_accelerations(
        self,
        positions: np.ndarray,
        masses: np.ndarray,
        G: float = 100.0,
        epsilon: float = 5.0,
    ) -> np.ndarray:
        """Compute the acceleration of every body.

        Args:
            positions: (n, 2) positions
            masses: (n,) masses
            G: Gravitational constant
            epsilon: Softening length

        Returns:
            New (n, 2) array of accelerations
        """
        if self.method == "direct":
            return self._compute_direct(positions, masses, G, epsilon)
        return self._compute_vectorized(positions, masses, G, epsilon)

    def _compute_vectorized(self, positions, masses, G, epsilon) -> np.ndarray:
        n = positions.shape[0]
        if n == 0:
            return np.zeros((0, 2))
        # r_diff[i, j] = x_j - x_i
        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        r_sq = np.sum(r_diff ** 2, axis=2)
        r_soft_cubed = (r_sq + epsilon ** 2) ** 1.5
        # No self-interaction
        np.fill_diagonal(r_soft_cubed, np.inf)
        # Coincident bodies with zero softening contribute nothing
        weight = np.divide(
            np.broadcast_to(masses[np.newaxis, :], (n, n)),
            r_soft_cubed,
            out=np.zeros((n, n)),
            where=r_soft_cubed > 0,
        )
        return G * np.sum(weight[:, :, np.newaxis] * r_diff, axis=1)

    def _compute_direct(self, positions, masses, G, epsilon) -> np.ndarray:
        """Loop-based evaluation, body by body."""
        n = positions.shape[0]
        accelerations = np.zeros((n, 2))
        for i in range(n):
            total = np.zeros(2)
            for j in range(n):
                if i == j:
                    continue
                d = positions[j] - positions[i]
                denominator = (d[0] * d[0] + d[1] * d[1] + epsilon ** 2) ** 1.5
                if denominator == 0:
                    continue
                total += masses[j] * d / denominator
            accelerations[i] = G * total
        return accelerations
