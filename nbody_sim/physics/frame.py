"""Zero-momentum frame correction."""

import numpy as np


def recenter_frame(positions: np.ndarray, velocities: np.ndarray, masses: np.ndarray) -> bool:
    """Move the barycenter to the origin and remove net momentum, in place.

    The engine skips this correction whenever a static body is present: the
    anchor already fixes the frame, and shifting only the movable bodies
    would never bring the barycenter to the origin.

    Args:
        positions: (n, 2) positions
        velocities: (n, 2) velocities
        masses: (n,) masses

    Returns:
        False if total mass is zero (nothing changed), True otherwise
    """
    total_mass = float(np.sum(masses))
    if total_mass == 0:
        return False

    com = np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass
    com_v = np.sum(masses[:, np.newaxis] * velocities, axis=0) / total_mass

    positions -= com
    velocities -= com_v
    return True
