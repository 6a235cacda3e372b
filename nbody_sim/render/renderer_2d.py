"""2D renderer using matplotlib."""

from typing import Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from nbody_sim.physics.body import Body
from nbody_sim.render.base import Renderer


class Renderer2D(Renderer):
    """Draws bodies as circles sized by radius, with their trails."""
    
    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        show_trails: bool = True,
        view_radius: Optional[float] = None,
        interactive: bool = True,
        background: str = "black",
    ):
        """Initialize 2D renderer.
        
        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            show_trails: Whether to draw body trails
            view_radius: Half-width of the view around the origin; fitted to
                the bodies on the first frame when None
            interactive: Show a window; False renders off-screen only
            background: Axes background color
        """
        self.figsize = figsize
        self.dpi = dpi
        self.show_trails = show_trails
        self.view_radius = view_radius
        self.interactive = interactive
        self.background = background
        
        self.fig: Optional[Figure] = None
        self.ax = None
        self.initialized = False
    
    def _initialize(self, bodies: Sequence[Body]):
        """Initialize plot if not already done."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        if self.view_radius is None:
            extents = [np.max(np.abs(b.position)) + b.radius for b in bodies]
            self.view_radius = max(max(extents, default=0.0) * 1.2, 10.0)
        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)
        self.initialized = True
    
    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            return False
        return True
    
    def _setup_axes(self):
        r = self.view_radius
        self.ax.set_facecolor(self.background)
        self.ax.set_aspect('equal')
        self.ax.set_xlim(-r, r)
        self.ax.set_ylim(-r, r)
        self.ax.set_xticks([])
        self.ax.set_yticks([])
    
    def render(self, bodies: Sequence[Body]):
        """Render current frame."""
        # Window closed by the user: stop drawing
        if self.initialized and self.interactive and not self._is_figure_open():
            return
        self._initialize(bodies)
        
        self.ax.clear()
        self._setup_axes()
        
        if self.show_trails:
            for body in bodies:
                trail = body.trail.to_array()
                if len(trail) < 2:
                    continue
                self.ax.plot(trail[:, 0], trail[:, 1], color=body.color,
                             alpha=0.4, linewidth=1.5)
        
        for body in bodies:
            x, y = body.position
            self.ax.add_patch(Circle((x, y), body.radius, color=body.color))
            if body.label:
                self.ax.annotate(body.label, (x, y), xytext=(0, 8),
                                 textcoords='offset points', ha='center',
                                 color=body.color, fontsize=7)
        
        if self.interactive:
            plt.draw()
            plt.pause(0.001)
    
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        
        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return rgba[:, :, :3].copy()
    
    def clear(self):
        """Clear the renderer."""
        if self.ax is not None:
            self.ax.clear()
    
    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
