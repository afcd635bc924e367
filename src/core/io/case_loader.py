"""
YAML case file loader with validation.
"""

from pathlib import Path
from typing import Optional
import logging
import yaml

from ..config.schemas import ViewerConfig
from ..geometry.mesh import TriangleMesh, DegenerateMeshError, normalize_model
from .geometry_io import MeshReader, generate_cube
from .case import Case

logger = logging.getLogger(__name__)


class CaseLoader:
    """Load and validate viewer cases from YAML files."""

    @staticmethod
    def _read_yaml(filepath: str | Path) -> dict:
        """Read a case file; the top level must be a mapping (empty file = defaults)."""
        filepath = Path(filepath)

        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f)

        if raw_config is None:
            return {}
        if not isinstance(raw_config, dict):
            raise ValueError(
                f"{filepath}: expected a mapping of settings, got {type(raw_config).__name__}"
            )
        return raw_config

    @staticmethod
    def load(filepath: str | Path) -> tuple[TriangleMesh, ViewerConfig, bool]:
        """
        Load case file and the mesh it points to.

        Args:
            filepath: Path to YAML case file

        Returns:
            Tuple of (mesh ready for rendering, validated config, used_fallback)

        Note:
            Consider using load_case() instead for cleaner access.
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Case file not found: {filepath}")

        # Validate with Pydantic
        config = ViewerConfig(**CaseLoader._read_yaml(filepath))

        model_path = None
        if config.model_file is not None:
            model_path = filepath.parent / config.model_file

        mesh, used_fallback = CaseLoader.load_mesh(model_path, normalize=config.normalize)

        return mesh, config, used_fallback

    @staticmethod
    def load_mesh(model_path: Optional[str | Path],
                  normalize: bool = True) -> tuple[TriangleMesh, bool]:
        """
        Load a mesh (or the fallback cube) and normalize it.

        The fallback cube is already canonical and is never normalized.
        A mesh with zero extent is returned as loaded.

        Args:
            model_path: Mesh file path, or None for the fallback cube
            normalize: Rescale into the canonical cube

        Returns:
            (mesh, used_fallback)
        """
        mesh, used_fallback = MeshReader.load(model_path)

        if used_fallback or not normalize:
            return mesh, used_fallback

        try:
            mesh = normalize_model(mesh)
        except DegenerateMeshError as e:
            logger.warning("Skipping normalization: %s", e)

        return mesh, used_fallback

    @staticmethod
    def validate(filepath: str | Path) -> bool:
        """
        Validate case file without loading the mesh.

        Args:
            filepath: Path to YAML case file

        Returns:
            True if valid, raises ValidationError otherwise
        """
        # This will raise ValidationError if invalid
        ViewerConfig(**CaseLoader._read_yaml(filepath))

        return True

    @staticmethod
    def load_case(case_dir: str | Path) -> Case:
        """
        Load a case directory and return a Case object.

        This is the recommended way to load cases:
            case = CaseLoader.load_case('cases/default')
            frame = case.render()

        Args:
            case_dir: Path to case directory (containing case.yaml)

        Returns:
            Case object with mesh, config, and helper properties
        """
        case_dir = Path(case_dir)
        case_file = case_dir / "case.yaml"

        if not case_file.exists():
            raise FileNotFoundError(f"No case.yaml found in {case_dir}")

        mesh, config, used_fallback = CaseLoader.load(case_file)

        return Case(
            mesh=mesh,
            config=config,
            case_dir=case_dir,
            used_fallback=used_fallback
        )

    @staticmethod
    def default_case() -> Case:
        """Case with default settings and the fallback cube."""
        return Case(
            mesh=generate_cube(),
            config=ViewerConfig(),
            case_dir=Path.cwd(),
            used_fallback=True
        )
