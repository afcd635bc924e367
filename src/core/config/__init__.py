"""Configuration schemas for validation."""

from .schemas import (
    CameraConfig,
    ProjectionConfig,
    SurfaceConfig,
    VisualizationConfig,
    OutputConfig,
    LoggingConfig,
    ViewerConfig,
)

__all__ = [
    "CameraConfig",
    "ProjectionConfig",
    "SurfaceConfig",
    "VisualizationConfig",
    "OutputConfig",
    "LoggingConfig",
    "ViewerConfig",
]
