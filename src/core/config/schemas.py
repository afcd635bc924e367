"""
Pydantic schemas for configuration validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Tuple, Optional, Literal
import re

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class CameraConfig(BaseModel):
    """Initial camera parameters."""
    rotation_y_deg: float = Field(
        default=45.0,
        description="Rotation about the y-axis in degrees"
    )
    rotation_x_deg: float = Field(
        default=0.0,
        description="Rotation about the x-axis in degrees"
    )
    distance: float = Field(
        default=4.0,
        gt=0,
        description="Camera distance from the model origin"
    )


class ProjectionConfig(BaseModel):
    """Perspective projection constants."""
    fov_deg: float = Field(
        default=90.0,
        gt=0,
        lt=180,
        description="Field of view in degrees"
    )
    near: float = Field(
        default=0.1,
        gt=0,
        description="Near plane distance"
    )
    far: float = Field(
        default=100.0,
        gt=0,
        description="Far plane distance"
    )

    @model_validator(mode='after')
    def check_planes(self):
        """Far plane must lie beyond the near plane."""
        if self.far <= self.near:
            raise ValueError(f"far ({self.far}) must be greater than near ({self.near})")
        return self


class SurfaceConfig(BaseModel):
    """Output surface and stroke settings."""
    width: int = Field(default=800, gt=0, description="Surface width [px]")
    height: int = Field(default=800, gt=0, description="Surface height [px]")
    stroke_color: str = Field(default="#ff0000", description="Wireframe color #RRGGBB")
    background_color: str = Field(default="#ffffff", description="Background color #RRGGBB")
    line_width: float = Field(default=1.0, gt=0, description="Stroke width [px]")

    @field_validator('stroke_color', 'background_color')
    @classmethod
    def validate_color(cls, v):
        """Accept #RRGGBB only."""
        v = v.strip()
        if not _HEX_COLOR.match(v):
            raise ValueError(f"Expected color as #RRGGBB, got '{v}'")
        return v.lower()

    @property
    def aspect(self) -> float:
        return self.width / self.height


class VisualizationConfig(BaseModel):
    """Interactive viewer settings."""
    interactive: bool = Field(default=False, description="Open the slider viewer")
    rotation_y_range: Tuple[float, float] = Field(
        default=(0.0, 360.0),
        description="Slider range for y rotation (degrees)"
    )
    rotation_x_range: Tuple[float, float] = Field(
        default=(-180.0, 180.0),
        description="Slider range for x rotation (degrees)"
    )
    distance_range: Tuple[float, float] = Field(
        default=(1.0, 20.0),
        description="Slider range for camera distance"
    )

    @field_validator('rotation_y_range', 'rotation_x_range', 'distance_range')
    @classmethod
    def check_range(cls, v):
        """Ranges must be increasing."""
        if v[0] >= v[1]:
            raise ValueError(f"Range minimum must be below maximum, got {v}")
        return v

    @field_validator('distance_range')
    @classmethod
    def check_positive_distance(cls, v):
        if v[0] <= 0:
            raise ValueError(f"Camera distance must stay positive, got {v}")
        return v


class OutputConfig(BaseModel):
    """Output configuration."""
    directory: str = Field(
        default="./results",
        description="Output directory path"
    )
    filename: str = Field(
        default="frame.png",
        description="Rendered frame file name"
    )
    dpi: int = Field(default=100, gt=0, description="Resolution for saved frames")
    protect_overwrite: bool = Field(
        default=False,
        description="Save into a timestamped subfolder"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level"
    )
    file: Optional[str] = Field(default=None, description="Optional log file path")


class ViewerConfig(BaseModel):
    """Top-level viewer configuration."""
    model_config = ConfigDict(
        extra="forbid",  # Catch typos in YAML
        validate_assignment=True,
        protected_namespaces=(),
    )

    name: str = Field(default="wireframe", description="Case name")
    description: str = Field(default="", description="Case description")
    model_file: Optional[str] = Field(
        default=None,
        description="Path to mesh file (None = built-in cube)"
    )
    normalize: bool = Field(
        default=True,
        description="Rescale the loaded mesh into the canonical [-1, 1] cube"
    )

    camera: CameraConfig = Field(default_factory=CameraConfig)
    projection: ProjectionConfig = Field(default_factory=ProjectionConfig)
    surface: SurfaceConfig = Field(default_factory=SurfaceConfig)
    visualization: VisualizationConfig = Field(default_factory=VisualizationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Check name is not blank."""
        if not v or not v.strip():
            raise ValueError("Case name cannot be empty")
        return v.strip()
