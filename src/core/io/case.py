"""
Case class - unified container for all case data.

Provides clean access to:
- Mesh (loaded, normalized or fallback)
- Camera and surface settings
- The geometry pipeline configured for this case
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..geometry import TriangleMesh
from ..config.schemas import ViewerConfig
from pipeline import CameraState, Frame, WireframePipeline


@dataclass
class Case:
    """
    Unified container for a viewer case.

    Usage:
        from core.io import CaseLoader

        case = CaseLoader.load_case('cases/default')
        print(case.name, case.num_triangles)
        frame = case.render()
    """

    mesh: TriangleMesh
    config: ViewerConfig
    case_dir: Path
    used_fallback: bool = False

    # Cached pipeline
    _pipeline: Optional[WireframePipeline] = None

    @property
    def name(self) -> str:
        """Case name."""
        return self.config.name

    @property
    def description(self) -> str:
        """Case description."""
        return self.config.description

    @property
    def num_triangles(self) -> int:
        return self.mesh.num_triangles

    @property
    def width(self) -> int:
        return self.config.surface.width

    @property
    def height(self) -> int:
        return self.config.surface.height

    @property
    def camera(self) -> CameraState:
        """Initial CameraState from the config."""
        return CameraState.from_config(self.config.camera)

    @property
    def pipeline(self) -> WireframePipeline:
        """WireframePipeline for this case's surface and projection (cached)."""
        if self._pipeline is None:
            self._pipeline = WireframePipeline.from_config(self.config)
        return self._pipeline

    @property
    def output_dir(self) -> Path:
        """Output directory, relative paths resolved against the case directory."""
        directory = Path(self.config.output.directory)
        if directory.is_absolute():
            return directory
        return self.case_dir / directory

    def render(self, camera: Optional[CameraState] = None) -> Frame:
        """
        Compute one frame.

        Args:
            camera: CameraState to use (defaults to the configured camera)

        Returns:
            Frame
        """
        if camera is None:
            camera = self.camera
        return self.pipeline.render(self.mesh, camera)

    def __repr__(self) -> str:
        return (
            f"Case(name='{self.name}', triangles={self.num_triangles}, "
            f"fallback={self.used_fallback})"
        )
