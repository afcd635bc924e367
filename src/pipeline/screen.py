"""
Perspective divide and mapping to pixel coordinates.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from core.geometry import Point4D


@dataclass(frozen=True)
class ScreenPoint:
    """
    Point on the output surface.

    x, y are pixels with the origin at the top-left; z is the NDC depth,
    passed through unchanged.
    """
    x: float
    y: float
    z: float

    @property
    def xy(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class ScreenTriangle:
    """Triangle ready for the render driver."""
    a: ScreenPoint
    b: ScreenPoint
    c: ScreenPoint
    depth: float
    index: int

    @property
    def points(self) -> Tuple[ScreenPoint, ScreenPoint, ScreenPoint]:
        return (self.a, self.b, self.c)

    def outline(self):
        """The three edges of the closed outline, as ((x0, y0), (x1, y1))."""
        return [(self.a.xy, self.b.xy), (self.b.xy, self.c.xy), (self.c.xy, self.a.xy)]


def to_screen(v: Point4D, width: float, height: float) -> Optional[ScreenPoint]:
    """
    Project a homogeneous point to the surface.

    Args:
        v: Point after view + projection
        width: Surface width in pixels
        height: Surface height in pixels

    Returns:
        ScreenPoint, or None if w == 0 (point on the focal plane)
    """
    if v.w == 0:
        return None

    x = v.x / v.w
    y = v.y / v.w
    z = v.z / v.w

    # NDC +y is up, screen +y is down
    return ScreenPoint(
        x=(x + 1) * 0.5 * width,
        y=(1 - y) * 0.5 * height,
        z=z
    )
