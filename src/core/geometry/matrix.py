"""
4x4 homogeneous matrices for the view/projection pipeline.

Matrices are (4, 4) float64 arrays in row-major order: row i, column j is
element ``i*4 + j`` of the flattened matrix. Points are column vectors, so
``multiply(A, B)`` applied to a point means "apply B, then A".
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

from .primitives import Point3D, Point4D

Matrix4 = NDArray[np.float64]


def matrix4(values: Sequence[float]) -> Matrix4:
    """
    Build a matrix from 16 row-major values.

    Args:
        values: Flat sequence of exactly 16 numbers

    Returns:
        (4, 4) matrix
    """
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    if arr.shape != (16,):
        raise ValueError(f"Matrix4 requires exactly 16 values, got {arr.shape[0]}")
    return arr.reshape(4, 4)


def to_row_major(m: Matrix4) -> Tuple[float, ...]:
    """Flatten a matrix to its 16 row-major values."""
    _check_matrix(m)
    return tuple(float(v) for v in m.reshape(16))


def identity() -> Matrix4:
    """4x4 identity matrix."""
    return np.eye(4, dtype=np.float64)


def translation(x: float, y: float, z: float) -> Matrix4:
    """Translation matrix with the offset in the last column."""
    m = np.eye(4, dtype=np.float64)
    m[:3, 3] = (x, y, z)
    return m


def rotation_x(angle_deg: float) -> Matrix4:
    """
    Right-handed rotation about the x-axis.

    Args:
        angle_deg: Rotation angle in degrees

    Returns:
        4x4 rotation matrix
    """
    rad = angle_deg * math.pi / 180.0
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0]
    ], dtype=np.float64)


def rotation_y(angle_deg: float) -> Matrix4:
    """
    Right-handed rotation about the y-axis.

    Args:
        angle_deg: Rotation angle in degrees

    Returns:
        4x4 rotation matrix
    """
    rad = angle_deg * math.pi / 180.0
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0]
    ], dtype=np.float64)


def perspective(fov_deg: float, aspect: float, near: float, far: float) -> Matrix4:
    """
    OpenGL-style perspective projection matrix.

    Args:
        fov_deg: Vertical field of view in degrees
        aspect: Surface width / height
        near: Near plane distance (> 0)
        far: Far plane distance (> near)

    Returns:
        4x4 projection matrix (w' = -z)
    """
    f = 1.0 / math.tan(math.radians(fov_deg) / 2.0)
    P = np.zeros((4, 4), dtype=np.float64)
    P[0, 0] = f / aspect
    P[1, 1] = f
    P[2, 2] = (far + near) / (near - far)
    P[2, 3] = (2 * far * near) / (near - far)
    P[3, 2] = -1.0
    return P


def multiply(a: Matrix4, b: Matrix4) -> Matrix4:
    """Matrix product a·b: result[i][j] = sum_k a[i][k] * b[k][j]."""
    _check_matrix(a)
    _check_matrix(b)
    return a @ b


def transform_point(m: Matrix4, v: Point3D) -> Point4D:
    """Transform a Cartesian point as m·[x, y, z, 1]."""
    _check_matrix(m)
    return Point4D.from_array(m @ v.to_homogeneous())


def transform_points(m: Matrix4, points: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Transform many points at once.

    Args:
        m: 4x4 matrix
        points: (N, 3) Cartesian points (w=1 is appended) or (N, 4) homogeneous

    Returns:
        (N, 4) homogeneous points
    """
    _check_matrix(m)
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] not in (3, 4):
        raise ValueError(f"points must have shape (N, 3) or (N, 4), got {points.shape}")

    if points.shape[1] == 3:
        points = np.hstack([points, np.ones((points.shape[0], 1))])

    return (m @ points.T).T


def _check_matrix(m: Matrix4):
    if np.shape(m) != (4, 4):
        raise ValueError(f"Matrix4 must have shape (4, 4), got {np.shape(m)}")
