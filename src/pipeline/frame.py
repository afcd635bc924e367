"""
One full redraw: transform, depth sort, screen projection.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import List, Optional, Tuple

from core.geometry import Matrix4, TriangleMesh
from .camera import CameraState
from .depth import sort_by_depth
from .screen import ScreenTriangle, to_screen
from .transform import build_projection_matrix, build_view_matrix, project_mesh

logger = logging.getLogger(__name__)

Segment = Tuple[Tuple[float, float], Tuple[float, float]]


@dataclass
class Frame:
    """
    Render-ready output of one redraw.

    Attributes:
        triangles: Screen triangles, farthest first
        skipped: Triangles dropped because a corner had w == 0
        camera: Camera state the frame was computed for
        width, height: Surface size in pixels
    """

    triangles: List[ScreenTriangle] = field(default_factory=list)
    skipped: int = 0
    camera: Optional[CameraState] = None
    width: int = 800
    height: int = 800

    @property
    def num_triangles(self) -> int:
        return len(self.triangles)

    def segments(self) -> List[Segment]:
        """Closed-outline line segments, three per triangle, back-to-front."""
        segments: List[Segment] = []
        for tri in self.triangles:
            segments.extend(tri.outline())
        return segments


class WireframePipeline:
    """
    Geometry pipeline from model-space triangles to ordered screen triangles.

    Holds only the surface size and projection constants; the mesh and the
    camera are passed into every render() call.
    """

    def __init__(self,
                 width: int = 800,
                 height: int = 800,
                 fov_deg: float = 90.0,
                 near: float = 0.1,
                 far: float = 100.0):
        """
        Args:
            width, height: Surface size in pixels
            fov_deg: Field of view in degrees
            near, far: Clip plane distances
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.fov_deg = fov_deg
        self.near = near
        self.far = far
        self.projection: Matrix4 = build_projection_matrix(width, height, fov_deg, near, far)

    @classmethod
    def from_config(cls, config) -> WireframePipeline:
        """Create from a ViewerConfig."""
        return cls(
            width=config.surface.width,
            height=config.surface.height,
            fov_deg=config.projection.fov_deg,
            near=config.projection.near,
            far=config.projection.far
        )

    def render(self, mesh: TriangleMesh, camera: CameraState) -> Frame:
        """
        Compute one frame.

        Args:
            mesh: Mesh in model space
            camera: Camera state for this frame

        Returns:
            Frame with triangles ordered back-to-front
        """
        view = build_view_matrix(camera)
        projected = sort_by_depth(project_mesh(mesh, view, self.projection))

        frame = Frame(camera=camera, width=self.width, height=self.height)

        for tri in projected:
            pts = [to_screen(v, self.width, self.height) for v in tri.corners()]

            if any(p is None for p in pts):
                frame.skipped += 1
                continue

            frame.triangles.append(ScreenTriangle(
                a=pts[0], b=pts[1], c=pts[2], depth=tri.depth, index=tri.index
            ))

        logger.debug(
            "Frame %s: %d triangles, %d skipped",
            camera, frame.num_triangles, frame.skipped
        )
        return frame
