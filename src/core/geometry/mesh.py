"""
Triangle mesh data structure, bounds and normalization.

Coordinates are stored as a single (T, 3, 3) array: triangle, corner, xyz.
Every triangle owns its own copy of its corner positions, so a mesh can be
rescaled without aliasing back to the vertex table it was parsed from.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from .primitives import Point3D

logger = logging.getLogger(__name__)

# Smallest axis extent that can be rescaled to the canonical cube
MIN_EXTENT = 1e-14


class DegenerateMeshError(ValueError):
    """Raised when a mesh is empty or has zero extent and cannot be normalized."""


@dataclass
class TriangleMesh:
    """
    Ordered list of triangles.

    Attributes:
        triangles: Corner coordinates (T, 3, 3). Order is source insertion order.
    """

    triangles: NDArray[np.float64]                # (T, 3, 3)

    def __post_init__(self):
        """Validate mesh data."""
        self.triangles = np.asarray(self.triangles, dtype=np.float64)
        if self.triangles.size == 0:
            self.triangles = self.triangles.reshape(0, 3, 3)

        if self.triangles.ndim != 3 or self.triangles.shape[1:] != (3, 3):
            raise ValueError(
                f"triangles must have shape (T, 3, 3), got {self.triangles.shape}"
            )

    @classmethod
    def empty(cls) -> TriangleMesh:
        """Mesh with no triangles."""
        return cls(triangles=np.zeros((0, 3, 3), dtype=np.float64))

    @classmethod
    def from_points(cls, triangles) -> TriangleMesh:
        """
        Create from nested sequences of points.

        Args:
            triangles: Iterable of 3-point triangles; points may be Point3D
                or (x, y, z) sequences

        Returns:
            TriangleMesh
        """
        rows = []
        for tri in triangles:
            corners = [p.to_array() if isinstance(p, Point3D) else p for p in tri]
            if len(corners) != 3:
                raise ValueError(f"A triangle has exactly 3 points, got {len(corners)}")
            rows.append(corners)

        if not rows:
            return cls.empty()
        return cls(triangles=np.array(rows, dtype=np.float64))

    @property
    def num_triangles(self) -> int:
        """Number of triangles."""
        return self.triangles.shape[0]

    @property
    def is_empty(self) -> bool:
        return self.num_triangles == 0

    @property
    def points(self) -> NDArray[np.float64]:
        """All corner points as (3T, 3), triangle-major."""
        return self.triangles.reshape(-1, 3)

    def triangle(self, index: int) -> Tuple[Point3D, Point3D, Point3D]:
        """Corner points of one triangle."""
        a, b, c = self.triangles[index]
        return Point3D.from_array(a), Point3D.from_array(b), Point3D.from_array(c)

    def copy(self) -> TriangleMesh:
        return TriangleMesh(triangles=self.triangles.copy())

    def __len__(self) -> int:
        return self.num_triangles

    def __repr__(self) -> str:
        return f"TriangleMesh(triangles={self.num_triangles})"


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box."""
    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float

    @property
    def center(self) -> NDArray[np.float64]:
        """Box center (3,)."""
        return np.array([
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2,
            (self.min_z + self.max_z) / 2
        ], dtype=np.float64)

    @property
    def size(self) -> NDArray[np.float64]:
        """Extent along each axis (3,)."""
        return np.array([
            self.max_x - self.min_x,
            self.max_y - self.min_y,
            self.max_z - self.min_z
        ], dtype=np.float64)

    @property
    def max_size(self) -> float:
        """Largest of the three axis extents."""
        return float(np.max(self.size))

    @property
    def is_empty(self) -> bool:
        """True for the bounds of an empty mesh (min > max)."""
        return self.min_x > self.max_x

    def __repr__(self) -> str:
        return (
            f"Bounds(min=({self.min_x:.4f}, {self.min_y:.4f}, {self.min_z:.4f}), "
            f"max=({self.max_x:.4f}, {self.max_y:.4f}, {self.max_z:.4f}))"
        )


def compute_bounds(mesh: TriangleMesh) -> Bounds:
    """
    Component-wise min/max over every point of every triangle.

    An empty mesh yields degenerate bounds (+inf mins, -inf maxes).
    """
    if mesh.is_empty:
        inf = float("inf")
        return Bounds(inf, inf, inf, -inf, -inf, -inf)

    pts = mesh.points
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    return Bounds(
        min_x=float(lo[0]), min_y=float(lo[1]), min_z=float(lo[2]),
        max_x=float(hi[0]), max_y=float(hi[1]), max_z=float(hi[2])
    )


def normalize_model(mesh: TriangleMesh) -> TriangleMesh:
    """
    Recenter a mesh at the origin and scale its largest extent to 2.

    Every corner is mapped as v' = (v - center) * (2 / max_size). The input
    mesh is left untouched; a new mesh with the same triangle count and
    corner order is returned.

    Args:
        mesh: Mesh to normalize

    Returns:
        Normalized copy of the mesh

    Raises:
        DegenerateMeshError: If the mesh is empty or has zero extent
    """
    if mesh.is_empty:
        raise DegenerateMeshError("Cannot normalize an empty mesh")

    bounds = compute_bounds(mesh)
    max_size = bounds.max_size

    if not np.isfinite(max_size) or max_size < MIN_EXTENT:
        raise DegenerateMeshError(
            f"Cannot normalize mesh with largest extent {max_size!r}"
        )

    scale = 2.0 / max_size
    logger.debug("Normalizing %d triangles: %s, scale %.6g",
                 mesh.num_triangles, bounds, scale)

    return TriangleMesh(triangles=(mesh.triangles - bounds.center) * scale)
