"""Painter's-algorithm ordering of projected triangles."""

from __future__ import annotations
from typing import Iterable, List

from .transform import ProjectedTriangle


def sort_by_depth(triangles: Iterable[ProjectedTriangle]) -> List[ProjectedTriangle]:
    """
    Order triangles far-to-near (depth descending).

    The sort is stable, so triangles with equal depth keep their mesh order.

    Args:
        triangles: Projected triangles

    Returns:
        New list, farthest first
    """
    return sorted(triangles, key=lambda tri: tri.depth, reverse=True)
