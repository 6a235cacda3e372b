"""Tests for the off-screen 2D renderer."""

import matplotlib
matplotlib.use("Agg")

from nbody_sim.presets import SolarSystem
from nbody_sim.render import Renderer2D


def test_render_and_capture():
    """Test drawing a few frames and grabbing the image."""
    engine = SolarSystem().make_engine()
    renderer = Renderer2D(figsize=(4, 4), dpi=50, interactive=False)

    for _ in range(6):
        engine.update(0.008)
        renderer.render(engine.bodies)

    frame = renderer.capture_frame()
    assert frame.shape == (200, 200, 3)
    assert renderer.view_radius > 400.0

    renderer.close()
    assert renderer.fig is None
