"""Tests for mesh export and loading."""

import numpy as np
import pytest

from domainmesh import DataLoadError, assemble_volume
from domainmesh.io import load_meshes, save_meshes, write_msh


@pytest.fixture
def meshes(hill):
    return assemble_volume(hill, density=2)


class TestNpz:

    def test_round_trip(self, meshes, tmp_path):
        path = save_meshes(meshes, tmp_path / "out" / "volume.npz")
        loaded = load_meshes(path)

        assert [m.name for m in loaded] == [m.name for m in meshes]
        for original, restored in zip(meshes, loaded):
            assert np.array_equal(original.positions, restored.positions)
            assert np.array_equal(original.normals, restored.normals)
            assert np.array_equal(original.indices, restored.indices)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError):
            load_meshes(tmp_path / "missing.npz")

    def test_out_of_range_indices(self, meshes, tmp_path):
        path = save_meshes(meshes, tmp_path / "volume.npz")
        with np.load(path) as data:
            arrays = {key: data[key] for key in data.files}
        arrays["indices_0"] = arrays["indices_0"] + len(arrays["positions_0"])
        np.savez(path, **arrays)

        with pytest.raises(DataLoadError):
            load_meshes(path)

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.npz"
        path.write_text("not an archive")
        with pytest.raises(DataLoadError):
            load_meshes(path)


class TestMsh:

    def test_write_msh(self, meshes, tmp_path):
        pytest.importorskip("gmsh")
        path = write_msh(meshes, tmp_path / "volume.msh")

        text = path.read_text()
        assert "$MeshFormat" in text
        assert "$PhysicalNames" in text
        assert '"y_low"' in text
        assert '"x_high"' in text

    def test_unknown_format(self, meshes, tmp_path):
        pytest.importorskip("gmsh")
        with pytest.raises(ValueError):
            write_msh(meshes, tmp_path / "volume.msh", mesh_format="vtk")
