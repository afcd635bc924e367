"""
View and projection transforms.

Each triangle corner goes through two sequential transforms: the view
matrix (rotate about x, then y, then push away from the camera) and then
the perspective projection. The resulting homogeneous corners are kept
undivided so the screen projector can detect w == 0.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np
from numpy.typing import NDArray

from core.geometry import (
    Matrix4,
    Point4D,
    TriangleMesh,
    multiply,
    perspective,
    rotation_x,
    rotation_y,
    transform_points,
    translation,
)
from .camera import CameraState


@dataclass(frozen=True, eq=False)
class ProjectedTriangle:
    """
    One triangle after view + projection, before the perspective divide.

    Attributes:
        vertices: Homogeneous corners (3, 4)
        depth: Mean post-projection z of the corners (sort key only)
        index: Position of the source triangle in the mesh
    """

    vertices: NDArray[np.float64]
    depth: float
    index: int = 0

    def corners(self) -> Tuple[Point4D, Point4D, Point4D]:
        a, b, c = self.vertices
        return Point4D.from_array(a), Point4D.from_array(b), Point4D.from_array(c)


def build_view_matrix(camera: CameraState) -> Matrix4:
    """
    View matrix T·Ry·Rx: rotation about x is applied first.

    Args:
        camera: Current camera state

    Returns:
        4x4 view matrix
    """
    view = multiply(translation(0.0, 0.0, -camera.distance), rotation_y(camera.rotation_y_deg))
    return multiply(view, rotation_x(camera.rotation_x_deg))


def build_projection_matrix(width: int, height: int,
                            fov_deg: float = 90.0,
                            near: float = 0.1,
                            far: float = 100.0) -> Matrix4:
    """Perspective projection for a width x height surface."""
    return perspective(fov_deg, width / height, near, far)


def project_mesh(mesh: TriangleMesh, view: Matrix4, projection: Matrix4) -> List[ProjectedTriangle]:
    """
    Transform every triangle corner by view, then by projection.

    Args:
        mesh: Mesh in model space
        view: View matrix
        projection: Projection matrix

    Returns:
        One ProjectedTriangle per mesh triangle, in mesh order
    """
    if mesh.is_empty:
        return []

    camera_space = transform_points(view, mesh.points)
    clip_space = transform_points(projection, camera_space)
    corners = clip_space.reshape(-1, 3, 4)

    # Depth is the projected z, not camera-space z
    depths = corners[:, :, 2].mean(axis=1)

    return [
        ProjectedTriangle(vertices=corners[i], depth=float(depths[i]), index=i)
        for i in range(corners.shape[0])
    ]
