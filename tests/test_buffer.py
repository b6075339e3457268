"""Tests for mesh buffers."""

import numpy as np
import pytest

from domainmesh import MeshBuffer
from domainmesh.mesh import merge_meshes


@pytest.fixture
def triangle():
    return MeshBuffer(
        [[0, 0, 0], [1, 0, 0], [0, 0, 1]],
        [[0, 1, 0]] * 3,
        [0, 2, 1],
        name="tri",
    )


class TestMeshBuffer:

    def test_shapes(self, triangle):
        assert triangle.positions.shape == (3, 3)
        assert triangle.indices.shape == (1, 3)
        assert triangle.n_vertices == 3
        assert triangle.n_triangles == 1

    def test_read_only(self, triangle):
        with pytest.raises(ValueError):
            triangle.positions[0, 0] = 5.0

    def test_copies_input(self):
        positions = np.zeros((3, 3))
        mesh = MeshBuffer(positions, np.tile([0.0, 1.0, 0.0], (3, 1)), [0, 1, 2])
        positions[0, 0] = 7.0
        assert mesh.positions[0, 0] == 0.0

    def test_flat(self, triangle):
        positions, normals, indices = triangle.flat()
        assert positions.dtype == np.float32
        assert normals.dtype == np.float32
        assert indices.dtype == np.uint32
        assert positions.shape == (9,)
        assert indices.tolist() == [0, 2, 1]

    def test_bounds(self, triangle):
        low, high = triangle.bounds
        assert np.allclose(low, [0, 0, 0])
        assert np.allclose(high, [1, 0, 1])

    def test_mismatched_normals(self):
        with pytest.raises(ValueError):
            MeshBuffer(np.zeros((3, 3)), np.zeros((2, 3)), [0, 1, 2])

    @pytest.mark.parametrize("indices", [[0, 2, 3], [-1, 0, 1]])
    def test_indices_must_reference_vertices(self, indices):
        with pytest.raises(ValueError):
            MeshBuffer(np.zeros((3, 3)), np.tile([0.0, 1.0, 0.0], (3, 1)), indices)

    def test_name_is_read_only(self, triangle):
        with pytest.raises(AttributeError):
            triangle.name = "renamed"
        assert triangle.name == "tri"


class TestMergeMeshes:

    def test_offsets_indices(self, triangle):
        merged = merge_meshes([triangle, triangle], name="pair")

        assert merged.name == "pair"
        assert merged.n_vertices == 6
        assert merged.indices.tolist() == [[0, 2, 1], [3, 5, 4]]

    def test_empty(self):
        assert merge_meshes([]).n_vertices == 0
