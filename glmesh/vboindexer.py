"""Merge duplicate vertices into an indexed vertex buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_NEAR_TOLERANCE = 0.01
# Indices are stored as 16-bit unsigned values.
_INDEX_MASK = 0xFFFF


@dataclass
class IndexedMesh:
    """Unique vertex attributes and the 16-bit indices that rebuild the triangles."""

    indices: list[int] = field(default_factory=list)
    vertices: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)


@dataclass
class IndexedTBNMesh(IndexedMesh):
    """Indexed mesh with accumulated tangents and bitangents."""

    tangents: list[Vec3] = field(default_factory=list)
    bitangents: list[Vec3] = field(default_factory=list)


def is_near(v1: float, v2: float) -> bool:
    """True if two components differ by less than 0.01."""
    return abs(v1 - v2) < _NEAR_TOLERANCE


def find_similar_vertex(
    vertex: Sequence[float],
    uv: Sequence[float],
    normal: Sequence[float],
    vertices: Sequence[Sequence[float]],
    uvs: Sequence[Sequence[float]],
    normals: Sequence[Sequence[float]],
) -> Optional[int]:
    """Index of the first stored vertex near in position, UV and normal, else None."""
    for index, (other_v, other_uv, other_n) in enumerate(zip(vertices, uvs, normals)):
        if (
            all(is_near(a, b) for a, b in zip(vertex, other_v))
            and all(is_near(a, b) for a, b in zip(uv, other_uv))
            and all(is_near(a, b) for a, b in zip(normal, other_n))
        ):
            return index
    return None


def _vec(values: Sequence[float]) -> tuple[float, ...]:
    return tuple(float(v) for v in values)


def _packed_key(vertex, uv, normal) -> bytes:
    with np.errstate(over="ignore"):
        return np.array([*vertex, *uv, *normal], dtype=np.float32).tobytes()


def index_vbo_slow(vertices, uvs, normals) -> IndexedMesh:
    """Index vertices, merging any within 0.01 on every component (linear search)."""
    out = IndexedMesh()
    for vertex, uv, normal in zip(vertices, uvs, normals, strict=True):
        found = find_similar_vertex(vertex, uv, normal, out.vertices, out.uvs, out.normals)
        if found is not None:
            out.indices.append(found & _INDEX_MASK)
        else:
            out.vertices.append(_vec(vertex))
            out.uvs.append(_vec(uv))
            out.normals.append(_vec(normal))
            out.indices.append((len(out.vertices) - 1) & _INDEX_MASK)
    return out


def index_vbo(vertices, uvs, normals) -> IndexedMesh:
    """Index vertices, merging only those whose single-precision bits match exactly."""
    out = IndexedMesh()
    seen: dict[bytes, int] = {}
    for vertex, uv, normal in zip(vertices, uvs, normals, strict=True):
        key = _packed_key(vertex, uv, normal)
        found = seen.get(key)
        if found is not None:
            out.indices.append(found)
        else:
            out.vertices.append(_vec(vertex))
            out.uvs.append(_vec(uv))
            out.normals.append(_vec(normal))
            new_index = (len(out.vertices) - 1) & _INDEX_MASK
            out.indices.append(new_index)
            seen[key] = new_index
    return out


def index_vbo_tbn(vertices, uvs, normals, tangents, bitangents) -> IndexedTBNMesh:
    """Index vertices like index_vbo_slow, summing tangents and bitangents of merged ones."""
    out = IndexedTBNMesh()
    for vertex, uv, normal, tangent, bitangent in zip(
        vertices, uvs, normals, tangents, bitangents, strict=True
    ):
        found = find_similar_vertex(vertex, uv, normal, out.vertices, out.uvs, out.normals)
        if found is not None:
            index = found & _INDEX_MASK
            out.indices.append(index)
            out.tangents[index] = tuple(
                a + float(b) for a, b in zip(out.tangents[index], tangent)
            )
            out.bitangents[index] = tuple(
                a + float(b) for a, b in zip(out.bitangents[index], bitangent)
            )
        else:
            out.vertices.append(_vec(vertex))
            out.uvs.append(_vec(uv))
            out.normals.append(_vec(normal))
            out.tangents.append(_vec(tangent))
            out.bitangents.append(_vec(bitangent))
            out.indices.append((len(out.vertices) - 1) & _INDEX_MASK)
    return out