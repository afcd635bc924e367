"""
Wireframe geometry pipeline.

Per redraw: view + projection transform, painter's-algorithm depth sort,
perspective divide to pixel coordinates.

Key classes:
- CameraState: Immutable camera parameters
- ProjectedTriangle: Triangle after projection, before the divide
- ScreenTriangle: Triangle in pixel coordinates
- WireframePipeline / Frame: One full redraw and its result
"""

from .camera import CameraState
from .transform import ProjectedTriangle, build_view_matrix, build_projection_matrix, project_mesh
from .depth import sort_by_depth
from .screen import ScreenPoint, ScreenTriangle, to_screen
from .frame import Frame, WireframePipeline

__all__ = [
    "CameraState",
    "ProjectedTriangle",
    "build_view_matrix",
    "build_projection_matrix",
    "project_mesh",
    "sort_by_depth",
    "ScreenPoint",
    "ScreenTriangle",
    "to_screen",
    "Frame",
    "WireframePipeline",
]
