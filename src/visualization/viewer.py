"""
Interactive slider viewer.

Three sliders drive the camera: rotation about y, rotation about x and
camera distance. Every slider change produces a new CameraState and one
full redraw.
"""

import logging
from typing import Optional
import matplotlib.pyplot as plt
from matplotlib.widgets import Slider

from core.geometry import TriangleMesh
from pipeline import CameraState, Frame, WireframePipeline
from .wireframe import WireframePlotter

logger = logging.getLogger(__name__)


class InteractiveViewer:
    """Matplotlib window with the wireframe surface and camera sliders."""

    # Height (in inches) reserved below the surface for the sliders
    CONTROLS_HEIGHT = 1.2

    def __init__(self,
                 mesh: TriangleMesh,
                 pipeline: WireframePipeline,
                 plotter: WireframePlotter,
                 camera: Optional[CameraState] = None,
                 rotation_y_range=(0.0, 360.0),
                 rotation_x_range=(-180.0, 180.0),
                 distance_range=(1.0, 20.0)):
        """
        Args:
            mesh: Mesh to display (fully loaded before the first redraw)
            pipeline: Geometry pipeline
            plotter: Render driver
            camera: Initial camera state
            rotation_y_range, rotation_x_range, distance_range: Slider limits
        """
        self.mesh = mesh
        self.pipeline = pipeline
        self.plotter = plotter
        self.camera = self._clamp(camera if camera is not None else CameraState(),
                                  rotation_y_range, rotation_x_range, distance_range)
        self.frame: Optional[Frame] = None
        self.redraws = 0

        w, h = plotter.figsize
        self.fig = plt.figure(figsize=(w, h + self.CONTROLS_HEIGHT), dpi=plotter.dpi)
        total_h = h + self.CONTROLS_HEIGHT
        self.ax = self.fig.add_axes((0.0, self.CONTROLS_HEIGHT / total_h, 1.0, h / total_h))

        row = 0.3 / total_h
        self.slider_rot_y = self._add_slider(2, row, "Rotation Y", rotation_y_range,
                                             self.camera.rotation_y_deg, "%.0f°")
        self.slider_rot_x = self._add_slider(1, row, "Rotation X", rotation_x_range,
                                             self.camera.rotation_x_deg, "%.0f°")
        self.slider_distance = self._add_slider(0, row, "Distance", distance_range,
                                                self.camera.distance, "%.2f")

        self.slider_rot_y.on_changed(self._on_rotation_y)
        self.slider_rot_x.on_changed(self._on_rotation_x)
        self.slider_distance.on_changed(self._on_distance)

        self.redraw()

    @classmethod
    def from_case(cls, case, camera: Optional[CameraState] = None) -> 'InteractiveViewer':
        """Create a viewer for a loaded Case, starting at camera (default: configured)."""
        vis = case.config.visualization
        return cls(
            mesh=case.mesh,
            pipeline=case.pipeline,
            plotter=WireframePlotter.from_config(case.config),
            camera=camera if camera is not None else case.camera,
            rotation_y_range=vis.rotation_y_range,
            rotation_x_range=vis.rotation_x_range,
            distance_range=vis.distance_range
        )

    @staticmethod
    def _clamp(camera: CameraState, rotation_y_range, rotation_x_range,
               distance_range) -> CameraState:
        """Move a camera into the slider ranges so handle and frame agree."""
        def clip(value, value_range):
            lo, hi = value_range
            return min(max(value, lo), hi)

        clamped = CameraState(
            rotation_y_deg=clip(camera.rotation_y_deg, rotation_y_range),
            rotation_x_deg=clip(camera.rotation_x_deg, rotation_x_range),
            distance=clip(camera.distance, distance_range)
        )
        if clamped != camera:
            logger.warning("Initial camera %s outside slider ranges, using %s", camera, clamped)
        return clamped

    def _add_slider(self, slot: int, row: float, label: str, value_range,
                    initial: float, fmt: str) -> Slider:
        lo, hi = value_range
        slider_ax = self.fig.add_axes((0.2, row * (slot + 0.5), 0.65, row * 0.6))
        return Slider(slider_ax, label, lo, hi, valinit=initial, valfmt=fmt)

    def _on_rotation_y(self, value):
        self.update(self.camera.with_rotation_y(value))

    def _on_rotation_x(self, value):
        self.update(self.camera.with_rotation_x(value))

    def _on_distance(self, value):
        self.update(self.camera.with_distance(value))

    def update(self, camera: CameraState):
        """Replace the camera state and redraw once."""
        self.camera = camera
        self.redraw()

    def redraw(self) -> Frame:
        """Run the full pipeline for the current camera and stroke the result."""
        self.frame = self.pipeline.render(self.mesh, self.camera)
        self.plotter.draw(self.ax, self.frame)
        self.fig.canvas.draw_idle()
        self.redraws += 1
        return self.frame

    def show(self):
        """Open the window (blocks until closed)."""
        logger.info("Opening viewer: %d triangles", self.mesh.num_triangles)
        plt.show()
