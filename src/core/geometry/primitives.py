"""
Geometric primitives: Point3D and Point4D.

Meshes store coordinates as NumPy arrays; these small value types are used
at the API seams (single-point transforms, screen projection, tests).
"""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray


@dataclass
class Point3D:
    """Cartesian point in model or camera space."""
    x: float
    y: float
    z: float = 0.0

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_homogeneous(self) -> NDArray[np.float64]:
        """Convert to homogeneous NumPy array (4,) with w=1."""
        return np.array([self.x, self.y, self.z, 1.0], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> Point3D:
        """Create from NumPy array."""
        if arr.shape != (3,):
            raise ValueError(f"Expected array of shape (3,), got {arr.shape}")
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    def __sub__(self, other: Point3D) -> Point3D:
        return Point3D.from_array(self.to_array() - other.to_array())

    def __repr__(self) -> str:
        return f"Point3D({self.x:.6f}, {self.y:.6f}, {self.z:.6f})"


@dataclass(frozen=True)
class Point4D:
    """
    Homogeneous point produced by a matrix transform.

    After a perspective projection w != 1; the Cartesian point is recovered
    by dividing x, y, z by w.
    """
    x: float
    y: float
    z: float
    w: float = 1.0

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (4,)."""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> Point4D:
        """Create from NumPy array."""
        if arr.shape != (4,):
            raise ValueError(f"Expected array of shape (4,), got {arr.shape}")
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]), w=float(arr[3]))

    @property
    def is_projectable(self) -> bool:
        """False for points on the camera's focal plane (w == 0)."""
        return self.w != 0

    def __repr__(self) -> str:
        return f"Point4D({self.x:.6f}, {self.y:.6f}, {self.z:.6f}, {self.w:.6f})"
