"""
Immutable camera state.

The control layer never mutates a camera; every input event produces a new
CameraState that is handed to the next redraw.
"""

from __future__ import annotations
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CameraState:
    """
    Orbit camera parameters.

    Attributes:
        rotation_y_deg: Rotation about the y-axis (degrees)
        rotation_x_deg: Rotation about the x-axis (degrees)
        distance: Distance from the model origin along -z (> 0)
    """

    rotation_y_deg: float = 45.0
    rotation_x_deg: float = 0.0
    distance: float = 4.0

    def __post_init__(self):
        if not self.distance > 0:
            raise ValueError(f"Camera distance must be positive, got {self.distance}")

    @classmethod
    def from_config(cls, config) -> CameraState:
        """Create from a CameraConfig."""
        return cls(
            rotation_y_deg=config.rotation_y_deg,
            rotation_x_deg=config.rotation_x_deg,
            distance=config.distance
        )

    def with_rotation_y(self, angle_deg: float) -> CameraState:
        return replace(self, rotation_y_deg=float(angle_deg))

    def with_rotation_x(self, angle_deg: float) -> CameraState:
        return replace(self, rotation_x_deg=float(angle_deg))

    def with_distance(self, distance: float) -> CameraState:
        return replace(self, distance=float(distance))
