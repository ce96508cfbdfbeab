import numpy as np
import pytest

from glmesh.tangentspace import compute_tangent_basis

FLAT_VERTS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
FLAT_UVS = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
UP = [(0.0, 0.0, 1.0)] * 3


def test_axis_aligned_triangle():
    tangents, bitangents = compute_tangent_basis(FLAT_VERTS, FLAT_UVS, UP)
    np.testing.assert_allclose(tangents, [(1.0, 0.0, 0.0)] * 3, atol=1e-12)
    np.testing.assert_allclose(bitangents, [(0.0, 1.0, 0.0)] * 3, atol=1e-12)


def test_one_entry_per_vertex_shared_per_triangle():
    verts = FLAT_VERTS + [(2.0, 0.0, 0.0), (3.0, 0.0, 0.0), (2.0, 2.0, 0.0)]
    uvs = FLAT_UVS + [(0.0, 0.0), (0.5, 0.0), (0.0, 1.0)]
    tangents, bitangents = compute_tangent_basis(verts, uvs, UP * 2)
    assert len(tangents) == len(bitangents) == 6
    assert bitangents[0] == bitangents[1] == bitangents[2]
    assert bitangents[3] == bitangents[4] == bitangents[5]


def test_mirrored_uvs_flip_tangent_to_keep_handedness():
    uvs = [(0.0, 0.0), (-1.0, 0.0), (0.0, 1.0)]
    tangents, bitangents = compute_tangent_basis(FLAT_VERTS, uvs, UP)
    for n, t, b in zip(UP, tangents, bitangents):
        assert np.dot(np.cross(n, t), b) >= 0.0
    np.testing.assert_allclose(tangents[0], (1.0, 0.0, 0.0), atol=1e-12)


def test_tangents_are_unit_and_orthogonal_to_normals():
    verts = [(0.0, 0.0, 0.0), (2.0, 0.5, 0.3), (0.2, 1.5, 1.0)]
    uvs = [(0.1, 0.2), (0.9, 0.3), (0.3, 0.8)]
    normal = np.array([0.2, -0.4, 1.0])
    normal /= np.linalg.norm(normal)
    normals = [tuple(normal)] * 3
    tangents, bitangents = compute_tangent_basis(verts, uvs, normals)
    for n, t, b in zip(normals, tangents, bitangents):
        assert np.linalg.norm(t) == pytest.approx(1.0)
        assert np.dot(n, t) == pytest.approx(0.0, abs=1e-12)
        assert np.dot(np.cross(n, t), b) >= 0.0


def test_empty_input():
    assert compute_tangent_basis([], [], []) == ([], [])


def test_vertex_count_must_be_multiple_of_three():
    with pytest.raises(ValueError):
        compute_tangent_basis(FLAT_VERTS[:2], FLAT_UVS[:2], UP[:2])


def test_lengths_must_match():
    with pytest.raises(ValueError):
        compute_tangent_basis(FLAT_VERTS, FLAT_UVS[:2], UP)