"""Per-triangle tangent and bitangent computation for normal mapping."""

from __future__ import annotations

from typing import Sequence

import numpy as np

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


def _as_tuple(vector: np.ndarray) -> Vec3:
    x, y, z = (float(component) for component in vector)
    return x, y, z


def compute_tangent_basis(
    vertices: Sequence[Sequence[float]],
    uvs: Sequence[Sequence[float]],
    normals: Sequence[Sequence[float]],
) -> tuple[list[Vec3], list[Vec3]]:
    """Return (tangents, bitangents), one per vertex of unindexed triangles.

    Each triangle's three vertices share one tangent and bitangent. Tangents
    are then orthogonalised against the vertex normal (Gram-Schmidt) and
    flipped where needed so that cross(n, t) points along the bitangent.
    """
    if not len(vertices) == len(uvs) == len(normals):
        raise ValueError("vertices, uvs and normals must have the same length")
    if len(vertices) % 3:
        raise ValueError("vertex count must be a multiple of 3")

    positions = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
    coords = np.asarray(uvs, dtype=np.float64).reshape(-1, 2)
    norms = np.asarray(normals, dtype=np.float64).reshape(-1, 3)

    tangents: list[np.ndarray] = []
    bitangents: list[np.ndarray] = []

    with np.errstate(divide="ignore", invalid="ignore"):
        for (v0, v1, v2), (uv0, uv1, uv2) in zip(
            positions.reshape(-1, 3, 3), coords.reshape(-1, 3, 2)
        ):
            delta_pos1 = v1 - v0
            delta_pos2 = v2 - v0
            delta_uv1 = uv1 - uv0
            delta_uv2 = uv2 - uv0

            r = np.float64(1.0) / (
                delta_uv1[0] * delta_uv2[1] - delta_uv1[1] * delta_uv2[0]
            )
            tangent = (delta_pos1 * delta_uv2[1] - delta_pos2 * delta_uv1[1]) * r
            bitangent = (delta_pos2 * delta_uv1[0] - delta_pos1 * delta_uv2[0]) * r

            tangents.extend([tangent] * 3)
            bitangents.extend([bitangent] * 3)

        out_tangents: list[Vec3] = []
        for n, t, b in zip(norms, tangents, bitangents):
            t = t - n * np.dot(n, t)
            t = t / np.linalg.norm(t)
            if np.dot(np.cross(n, t), b) < 0.0:
                t = t * -1.0
            out_tangents.append(_as_tuple(t))

    return out_tangents, [_as_tuple(b) for b in bitangents]