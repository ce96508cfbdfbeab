"""Minimal Wavefront OBJ reader producing flat, per-corner triangle data."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Sequence, TypeVar, Union

logger = logging.getLogger(__name__)

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_T = TypeVar("_T")


class ObjFormatError(ValueError):
    """Raised when OBJ text cannot be read by this simple parser."""


@dataclass
class Mesh:
    """Unindexed triangle data: one entry per triangle corner."""

    vertices: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vertices)


def _floats(tokens: Sequence[str], count: int, header: str, lineno: int) -> tuple[float, ...]:
    if len(tokens) < count:
        raise ObjFormatError(
            f"line {lineno}: '{header}' needs {count} values, got {len(tokens)}"
        )
    try:
        return tuple(float(token) for token in tokens[:count])
    except ValueError as exc:
        raise ObjFormatError(f"line {lineno}: bad number in '{header}' record") from exc


def _face_corner(token: str, lineno: int) -> tuple[int, int, int]:
    parts = token.split("/")
    if len(parts) != 3:
        raise ObjFormatError(
            f"line {lineno}: face corner '{token}' is not of the form v/vt/vn; "
            "try exporting with other options"
        )
    try:
        vertex, uv, normal = (int(part) for part in parts)
    except ValueError as exc:
        raise ObjFormatError(
            f"line {lineno}: face corner '{token}' is not of the form v/vt/vn; "
            "try exporting with other options"
        ) from exc
    return vertex, uv, normal


def _lookup(table: list[_T], index: int, kind: str) -> _T:
    if not 1 <= index <= len(table):
        raise ObjFormatError(f"{kind} index {index} out of range (have {len(table)})")
    return table[index - 1]


def parse_obj(text: str) -> Mesh:
    """Parse OBJ text holding triangles with v/vt/vn corners.

    The V texture coordinate is negated, as the textures used with these
    meshes are stored upside down. Only the first three corners of a face
    are used; unknown records are skipped.
    """
    positions: list[Vec3] = []
    tex_coords: list[Vec2] = []
    normals: list[Vec3] = []
    corners: list[tuple[int, int, int]] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        header, args = tokens[0], tokens[1:]
        if header == "v":
            x, y, z = _floats(args, 3, header, lineno)
            positions.append((x, y, z))
        elif header == "vt":
            u, v = _floats(args, 2, header, lineno)
            tex_coords.append((u, -v))
        elif header == "vn":
            x, y, z = _floats(args, 3, header, lineno)
            normals.append((x, y, z))
        elif header == "f":
            if len(args) < 3:
                raise ObjFormatError(
                    f"line {lineno}: face needs three v/vt/vn corners; "
                    "try exporting with other options"
                )
            corners.extend(_face_corner(token, lineno) for token in args[:3])

    mesh = Mesh()
    for vertex_index, uv_index, normal_index in corners:
        mesh.vertices.append(_lookup(positions, vertex_index, "vertex"))
        mesh.uvs.append(_lookup(tex_coords, uv_index, "uv"))
        mesh.normals.append(_lookup(normals, normal_index, "normal"))
    return mesh


def load_obj(path: Union[str, "os.PathLike[str]"]) -> Mesh:
    """Read and parse an OBJ file."""
    logger.info("Loading OBJ file %s...", path)
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_obj(handle.read())