"""Classic three-body presets for the unconstrained engine."""

from typing import List
from nbody_sim.physics.body import Body
from nbody_sim.presets.base import Preset

COLORS = ["#FF4136", "#2ECC40", "#0074D9", "#FFDC00", "#B10DC9"]

# Chenciner-Montgomery figure-eight, lengths scaled by 100
FIGURE8_X = (97.000436, -24.308753)
FIGURE8_V = (0.466203685, 0.43236573)


def _body(body_id, mass, position, velocity, radius, color) -> Body:
    return Body(
        id=body_id,
        mass=mass,
        position=position,
        velocity=velocity,
        radius=radius,
        color=color,
    )


class FigureEight(Preset):
    """Three equal masses chasing each other around a figure-eight curve.

    With G * m / L = 1 (default G = 10, m = 10, L = 100) the initial data is
    an exact periodic orbit; PERIOD is its period in those units. The
    interactive app ran this preset at G = 100, where it is not periodic.
    """

    PERIOD = 632.591398

    policy_name = "unconstrained"
    dt = 0.5
    substeps = 1

    def __init__(self, G: float = 10.0, mass: float = 10.0, radius: float = 15.0):
        super().__init__(G)
        self.mass = mass
        self.radius = radius

    @property
    def name(self) -> str:
        return "figure8"

    def generate(self) -> List[Body]:
        x, y = FIGURE8_X
        vx, vy = FIGURE8_V
        return [
            _body(1, self.mass, (x, y), (vx, vy), self.radius, COLORS[0]),
            _body(2, self.mass, (-x, -y), (vx, vy), self.radius, COLORS[1]),
            _body(3, self.mass, (0.0, 0.0), (-2 * vx, -2 * vy), self.radius, COLORS[2]),
        ]


class RandomThreeBody(Preset):
    """Three unequal masses on a loosely bound, chaotic start."""

    policy_name = "unconstrained"
    dt = 0.5
    substeps = 1

    @property
    def name(self) -> str:
        return "random"

    def generate(self) -> List[Body]:
        return [
            _body(1, 20.0, (100.0, 0.0), (0.0, 1.0), 20.0, COLORS[0]),
            _body(2, 15.0, (-100.0, 0.0), (0.0, -1.0), 18.0, COLORS[1]),
            _body(3, 10.0, (0.0, 150.0), (1.0, 0.0), 15.0, COLORS[2]),
        ]
