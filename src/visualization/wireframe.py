"""
Matplotlib render driver for wireframe frames.
"""

from typing import Optional, Tuple
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from pipeline import Frame


class WireframePlotter:
    """
    Strokes the triangles of a Frame onto a fixed-size surface.

    The axes are set up in pixel coordinates with the origin at the top-left,
    so screen points from the pipeline are drawn as-is. Triangles are drawn
    in list order with increasing z-order: nearer outlines overdraw farther
    ones.
    """

    def __init__(self,
                 width: int = 800,
                 height: int = 800,
                 stroke_color: str = '#ff0000',
                 line_width: float = 1.0,
                 background_color: str = '#ffffff',
                 dpi: int = 100):
        """
        Args:
            width, height: Surface size in pixels
            stroke_color: Outline color
            line_width: Outline width in pixels
            background_color: Surface color
            dpi: Pixels per inch used to size figures
        """
        self.width = width
        self.height = height
        self.stroke_color = stroke_color
        self.line_width = line_width
        self.background_color = background_color
        self.dpi = dpi

    @classmethod
    def from_config(cls, config) -> 'WireframePlotter':
        """Create from a ViewerConfig."""
        surface = config.surface
        return cls(
            width=surface.width,
            height=surface.height,
            stroke_color=surface.stroke_color,
            line_width=surface.line_width,
            background_color=surface.background_color,
            dpi=config.output.dpi
        )

    @property
    def figsize(self) -> Tuple[float, float]:
        """Figure size in inches for an exact width x height pixel surface."""
        return (self.width / self.dpi, self.height / self.dpi)

    def create_figure(self) -> Tuple[Figure, Axes]:
        """Figure with a single axes covering the whole surface."""
        fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
        return fig, ax

    def clear(self, ax: Axes):
        """Clear the surface and reset pixel coordinates."""
        ax.cla()
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)  # Screen y points down
        ax.set_aspect('equal')
        ax.set_facecolor(self.background_color)
        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

    def draw(self, ax: Axes, frame: Frame, title: Optional[str] = None) -> int:
        """
        Clear the surface and stroke every triangle outline of the frame.

        Args:
            ax: Target axes
            frame: Frame from WireframePipeline.render()
            title: Optional axes title

        Returns:
            Number of outlines drawn
        """
        self.clear(ax)
        if title:
            ax.set_title(title)

        for order, tri in enumerate(frame.triangles):
            xs = [tri.a.x, tri.b.x, tri.c.x, tri.a.x]
            ys = [tri.a.y, tri.b.y, tri.c.y, tri.a.y]
            ax.plot(xs, ys, color=self.stroke_color,
                    linewidth=self.line_width, zorder=order + 1)

        return frame.num_triangles
