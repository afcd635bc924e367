"""Geometry primitives, 4x4 matrices and triangle meshes."""

from .primitives import Point3D, Point4D
from .matrix import (
    Matrix4,
    matrix4,
    to_row_major,
    identity,
    translation,
    rotation_x,
    rotation_y,
    perspective,
    multiply,
    transform_point,
    transform_points,
)
from .mesh import TriangleMesh, Bounds, DegenerateMeshError, compute_bounds, normalize_model

__all__ = [
    "Point3D",
    "Point4D",
    "Matrix4",
    "matrix4",
    "to_row_major",
    "identity",
    "translation",
    "rotation_x",
    "rotation_y",
    "perspective",
    "multiply",
    "transform_point",
    "transform_points",
    "TriangleMesh",
    "Bounds",
    "DegenerateMeshError",
    "compute_bounds",
    "normalize_model",
]
