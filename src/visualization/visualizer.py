"""
Unified visualization facade for the wireframe viewer.

Provides a single entry point for rendering frames:
- Single frame at the configured surface size
- Several camera views side by side (turntable sheets)

Handles common concerns:
- Figure creation and sizing
- Save vs display logic
- Output path management (with datetime override protection)
"""

from pathlib import Path
from datetime import datetime
import logging
from typing import Optional, Tuple, Union, Sequence
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from core.geometry import TriangleMesh
from pipeline import CameraState, Frame, WireframePipeline
from .wireframe import WireframePlotter

logger = logging.getLogger(__name__)


class OutputManager:
    """
    Manages output paths and save behavior.

    Features:
    - Auto-creates the output directory if missing
    - Optional datetime subfolder for overwrite protection
    - Consistent path resolution
    """

    def __init__(self,
                 base_dir: Union[str, Path],
                 protect_overwrite: bool = False):
        """
        Args:
            base_dir: Base output directory (typically case_dir/results)
            protect_overwrite: If True, saves to timestamped subfolder
        """
        self.base_dir = Path(base_dir)
        self.protect_overwrite = protect_overwrite
        self._output_dir: Optional[Path] = None

    @property
    def output_dir(self) -> Path:
        """Get (and create) the output directory."""
        if self._output_dir is None:
            if self.protect_overwrite:
                timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                self._output_dir = self.base_dir / timestamp
            else:
                self._output_dir = self.base_dir

            self._output_dir.mkdir(parents=True, exist_ok=True)

        return self._output_dir

    def get_path(self, filename: str) -> Path:
        """Get full path for a file in the output directory."""
        return self.output_dir / filename

    def reset(self):
        """Reset output directory (for new timestamp on next access)."""
        self._output_dir = None


class Visualizer:
    """
    Main visualization facade.

    Usage:
        # Single frame
        viz = Visualizer(plotter, output_dir='cases/default/results')
        viz.plot_frame(frame)
        viz.finalize(save='frame.png')

        # Turntable sheet
        viz.plot_turntable(pipeline, mesh, camera, steps=4)
        viz.finalize(save='turntable.png')
    """

    def __init__(self,
                 plotter: Optional[WireframePlotter] = None,
                 output_dir: Optional[Union[str, Path]] = None,
                 protect_overwrite: bool = False):
        """
        Args:
            plotter: Render driver (default 800x800 red strokes)
            output_dir: Base output directory for saves
            protect_overwrite: Save to timestamped subfolder
        """
        self.plotter = plotter if plotter is not None else WireframePlotter()

        if output_dir is not None:
            self.output = OutputManager(output_dir, protect_overwrite)
        else:
            self.output = None

        # Current figure state
        self.fig: Optional[Figure] = None
        self.axes: Optional[Union[Axes, np.ndarray]] = None

    # -------------------------------------------------------------------------
    # Figure Management
    # -------------------------------------------------------------------------

    def create_figure(self,
                      subplots: Tuple[int, int] = (1, 1),
                      title: Optional[str] = None) -> Tuple[Figure, Union[Axes, np.ndarray]]:
        """
        Create a new figure; each subplot gets the plotter's surface size.

        Args:
            subplots: (rows, cols) subplot grid
            title: Super title for figure

        Returns:
            (fig, axes) tuple
        """
        if subplots == (1, 1):
            self.fig, self.axes = self.plotter.create_figure()
        else:
            w, h = self.plotter.figsize
            figsize = (w * subplots[1], h * subplots[0])
            self.fig, self.axes = plt.subplots(subplots[0], subplots[1],
                                               figsize=figsize, dpi=self.plotter.dpi)

        if title:
            self.fig.suptitle(title, fontsize=14, fontweight='bold')

        return self.fig, self.axes

    def _get_ax(self, ax_index: Optional[int] = None) -> Axes:
        """Get axis for plotting."""
        if self.fig is None:
            # Auto-create single figure
            self.create_figure()

        if ax_index is None:
            if isinstance(self.axes, np.ndarray):
                return self.axes.flat[0]
            return self.axes

        if isinstance(self.axes, np.ndarray):
            return self.axes.flat[ax_index]

        if ax_index != 0:
            raise ValueError(f"ax_index={ax_index} invalid for single subplot")
        return self.axes

    def finalize(self,
                 save: Optional[str] = None,
                 show: bool = False,
                 dpi: Optional[int] = None) -> Optional[Path]:
        """
        Finalize figure: save and/or display.

        Args:
            save: Filename to save (in output_dir). None = don't save.
            show: Whether to display interactively
            dpi: Resolution for saved image (default: plotter dpi)

        Returns:
            Path of the saved file, if any
        """
        if self.fig is None:
            raise ValueError("No figure to finalize. Call a plot method first.")

        save_path = None
        if save is not None:
            if self.output is None:
                # Save to current directory
                save_path = Path(save)
            else:
                save_path = self.output.get_path(save)

            self.fig.savefig(save_path, dpi=dpi or self.plotter.dpi)
            logger.info("Saved: %s", save_path)

        if show:
            plt.show()
        else:
            plt.close(self.fig)
            self.fig = None
            self.axes = None

        return save_path

    # -------------------------------------------------------------------------
    # Frame Plotting
    # -------------------------------------------------------------------------

    def plot_frame(self,
                   frame: Frame,
                   ax_index: Optional[int] = None,
                   title: Optional[str] = None) -> int:
        """
        Draw one frame.

        Args:
            frame: Frame from WireframePipeline.render()
            ax_index: Subplot index (None for single/first plot)
            title: Subplot title

        Returns:
            Number of outlines drawn
        """
        ax = self._get_ax(ax_index)
        return self.plotter.draw(ax, frame, title=title)

    def plot_turntable(self,
                       pipeline: WireframePipeline,
                       mesh: TriangleMesh,
                       camera: CameraState,
                       steps: int = 4,
                       cols: Optional[int] = None) -> Sequence[Frame]:
        """
        Render the mesh from evenly spaced y rotations in a subplot grid.

        Args:
            pipeline: Geometry pipeline
            mesh: Mesh to render
            camera: Base camera; its y rotation is the first view
            steps: Number of views
            cols: Grid columns (default: all views on one row)

        Returns:
            Frames in view order
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")

        cols = cols or steps
        rows = int(np.ceil(steps / cols))
        self.create_figure(subplots=(rows, cols))

        frames = []
        for i in range(steps):
            angle = camera.rotation_y_deg + i * 360.0 / steps
            frame = pipeline.render(mesh, camera.with_rotation_y(angle))
            self.plot_frame(frame, ax_index=i, title=f"rotY = {angle:.0f}°")
            frames.append(frame)

        # Hide unused grid cells
        if isinstance(self.axes, np.ndarray):
            for ax in self.axes.flat[steps:]:
                ax.set_visible(False)

        return frames
