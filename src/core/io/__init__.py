"""IO utilities: mesh readers, fallback cube, case loader."""

from .geometry_io import MeshReader, ParseResult, parse_mesh, parse_mesh_report, generate_cube
from .case_loader import CaseLoader
from .case import Case

__all__ = [
    "MeshReader",
    "ParseResult",
    "parse_mesh",
    "parse_mesh_report",
    "generate_cube",
    "CaseLoader",
    "Case",
]
