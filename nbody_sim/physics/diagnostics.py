"""Energy and momentum diagnostics for N-body simulations."""

from typing import Optional, Tuple
import numpy as np


class Diagnostics:
    """Aggregate quantities of a body system.

    Diagnostics never drive the simulation; they are read-only summaries for
    display and reporting.
    """

    def __init__(self, G: float = 100.0, epsilon: float = 5.0, soften_potential: bool = False):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            epsilon: Softening length of the force law
            soften_potential: If True, the pair potential uses sqrt(r^2 + eps^2);
                otherwise the raw distance r (coincident pairs are skipped)
        """
        self.G = G
        self.epsilon = epsilon
        self.soften_potential = soften_potential

    def compute_energies(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        masses: np.ndarray,
        is_static: Optional[np.ndarray] = None,
    ) -> Tuple[float, float, float]:
        """Compute kinetic, potential and total energy.

        K = 0.5 * Σ m_i * |v_i|^2 over non-static bodies
        U = -G * Σ_{i<j} m_i * m_j / r_ij   (r_ij softened or raw, see __init__)

        Args:
            positions: (n, 2) positions
            velocities: (n, 2) velocities
            masses: (n,) masses
            is_static: Optional (n,) mask; static bodies carry no kinetic energy

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        K = self.compute_kinetic_energy(velocities, masses, is_static)
        U = self.compute_potential_energy(positions, masses)
        return K, U, K + U

    def compute_kinetic_energy(self, velocities, masses, is_static=None) -> float:
        v_sq = np.sum(velocities ** 2, axis=1)
        ke = 0.5 * masses * v_sq
        if is_static is not None:
            ke = np.where(is_static, 0.0, ke)
        return float(np.sum(ke))

    def compute_potential_energy(self, positions, masses) -> float:
        """Pairwise potential energy, each unique pair counted once."""
        n = positions.shape[0]
        if n < 2:
            return 0.0
        i_idx, j_idx = np.triu_indices(n, k=1)
        r_diff = positions[j_idx] - positions[i_idx]
        r_sq = np.sum(r_diff ** 2, axis=1)
        m_pair = masses[i_idx] * masses[j_idx]
        if self.soften_potential:
            distance = np.sqrt(r_sq + self.epsilon ** 2)
        else:
            distance = np.sqrt(r_sq)
        terms = np.divide(m_pair, distance, out=np.zeros_like(m_pair), where=distance > 0)
        return float(-self.G * np.sum(terms))

    def compute_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum Σ m_i * v_i."""
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)

    def compute_center_of_mass(self, positions, masses) -> np.ndarray:
        """Mass-weighted centroid; the origin for a massless system."""
        total_mass = np.sum(masses)
        if total_mass == 0:
            return np.zeros(2)
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass

    def compute_angular_momentum(self, positions, velocities, masses) -> float:
        """Angular momentum about the origin: L_z = Σ m_i (x_i v_y,i - y_i v_x,i)."""
        return float(np.sum(masses * (positions[:, 0] * velocities[:, 1] -
                                      positions[:, 1] * velocities[:, 0])))

    def compute_virial_ratio(self, positions, velocities, masses, is_static=None) -> float:
        """Compute virial ratio Q = 2K / |U|.

        Q = 1.0 for virial equilibrium (e.g. a circular two-body orbit).

        Returns:
            Virial ratio Q, or inf when |U| is negligible
        """
        K, U, _ = self.compute_energies(positions, velocities, masses, is_static)
        if abs(U) < 1e-10:
            return float('inf')
        return float(2.0 * K / abs(U))

