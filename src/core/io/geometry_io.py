"""
Mesh readers for line-oriented OBJ-style text, plus the fallback cube.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import List, Optional, Tuple
import numpy as np

from ..geometry.mesh import TriangleMesh

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """
    Outcome of parsing mesh text.

    Attributes:
        mesh: Parsed triangles
        num_vertices: Vertex records accepted into the vertex table
        num_faces: Face records that produced a triangle
        ignored_lines: Blank, comment, unknown-record and short-face lines
        malformed: (line number, reason) for records that could not be used
    """

    mesh: TriangleMesh
    num_vertices: int = 0
    num_faces: int = 0
    ignored_lines: int = 0
    malformed: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """True if no record was malformed."""
        return not self.malformed


def parse_mesh_report(text: str) -> ParseResult:
    """
    Parse mesh text and report what was used, ignored or malformed.

    Recognized records:
        v x y z          vertex (extra tokens ignored)
        f i1 i2 ... ik   face, 1-based indices, each optionally i/vt/vn

    A face contributes one triangle built from its first three vertices;
    faces with fewer than 3 indices are dropped and longer faces are not
    fan-triangulated. Everything else is ignored.

    Args:
        text: Mesh source text

    Returns:
        ParseResult
    """
    vertices: List[List[float]] = []
    triangles: List[List[List[float]]] = []
    result = ParseResult(mesh=TriangleMesh.empty())

    for line_no, line in enumerate(text.splitlines(), start=1):
        parts = line.split()

        if not parts or parts[0] not in ('v', 'f'):
            result.ignored_lines += 1
            continue

        if parts[0] == 'v':
            if len(parts) < 4:
                result.malformed.append((line_no, "vertex needs 3 coordinates"))
                continue
            try:
                vertices.append([float(p) for p in parts[1:4]])
            except ValueError:
                result.malformed.append((line_no, "vertex coordinate is not a number"))
            continue

        # Face record
        refs = parts[1:]
        if len(refs) < 3:
            result.ignored_lines += 1
            continue

        try:
            idx = [int(ref.split('/')[0]) - 1 for ref in refs[:3]]
        except ValueError:
            result.malformed.append((line_no, "face index is not an integer"))
            continue

        if any(i < 0 or i >= len(vertices) for i in idx):
            result.malformed.append(
                (line_no, f"face references vertex outside 1..{len(vertices)}")
            )
            continue

        # list() copies each position so triangles never share storage
        triangles.append([list(vertices[i]) for i in idx])

    result.num_vertices = len(vertices)
    result.num_faces = len(triangles)
    if triangles:
        result.mesh = TriangleMesh(triangles=np.array(triangles, dtype=np.float64))

    for line_no, reason in result.malformed:
        logger.debug("Ignoring malformed line %d: %s", line_no, reason)

    return result


def parse_mesh(text: str) -> TriangleMesh:
    """Parse mesh text best-effort; malformed lines are skipped silently."""
    return parse_mesh_report(text).mesh


class MeshReader:
    """Read meshes from files, with the built-in cube as fallback."""

    @staticmethod
    def read(filepath: str | Path) -> TriangleMesh:
        """
        Read a mesh file.

        Args:
            filepath: Path to mesh text file (.obj)

        Returns:
            TriangleMesh (possibly empty)
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Mesh file not found: {filepath}")

        report = parse_mesh_report(filepath.read_text(encoding='utf-8'))

        logger.info(
            "Loaded %s: %d vertices, %d triangles",
            filepath.name, report.num_vertices, report.mesh.num_triangles
        )
        if report.malformed:
            logger.warning(
                "%s: skipped %d malformed line(s)", filepath.name, len(report.malformed)
            )

        return report.mesh

    @staticmethod
    def load(filepath: Optional[str | Path]) -> Tuple[TriangleMesh, bool]:
        """
        Read a mesh, substituting the fallback cube on failure.

        A missing path, an unreadable file, or a file without any triangle
        all count as a failed load.

        Args:
            filepath: Path to mesh file, or None for the fallback cube

        Returns:
            (mesh, used_fallback)
        """
        if filepath is None:
            return generate_cube(), True

        try:
            mesh = MeshReader.read(filepath)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load %s (%s), using cube", filepath, e)
            return generate_cube(), True

        if mesh.is_empty:
            logger.warning("No triangles in %s, using cube", filepath)
            return generate_cube(), True

        return mesh, False


def generate_cube() -> TriangleMesh:
    """
    Axis-aligned cube with corners at +/-1, as 12 triangles.

    Faces in order: +z, -z, +y, -y, +x, -x; two triangles each.

    Returns:
        TriangleMesh of the cube
    """
    triangles = [
        [[-1, -1, 1], [1, -1, 1], [1, 1, 1]],
        [[-1, -1, 1], [1, 1, 1], [-1, 1, 1]],

        [[-1, -1, -1], [-1, 1, -1], [1, 1, -1]],
        [[-1, -1, -1], [1, 1, -1], [1, -1, -1]],

        [[-1, 1, -1], [-1, 1, 1], [1, 1, 1]],
        [[-1, 1, -1], [1, 1, 1], [1, 1, -1]],

        [[-1, -1, -1], [1, -1, -1], [1, -1, 1]],
        [[-1, -1, -1], [1, -1, 1], [-1, -1, 1]],

        [[1, -1, -1], [1, 1, -1], [1, 1, 1]],
        [[1, -1, -1], [1, 1, 1], [1, -1, 1]],

        [[-1, -1, -1], [-1, -1, 1], [-1, 1, 1]],
        [[-1, -1, -1], [-1, 1, 1], [-1, 1, -1]],
    ]
    return TriangleMesh(triangles=np.array(triangles, dtype=np.float64))
