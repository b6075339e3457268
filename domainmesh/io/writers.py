"""Mesh export utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from domainmesh.exceptions import MeshGenerationError
from domainmesh.mesh.buffer import MeshBuffer

logger = logging.getLogger(__name__)

_MSH_VERSIONS = {"msh2": 2.2, "msh4": 4.1}


def _mesh_name(mesh: MeshBuffer, i: int) -> str:
    return mesh.name or f"mesh_{i}"


def save_meshes(meshes: Sequence[MeshBuffer], path: str | Path) -> Path:
    """Save mesh buffers to a compressed numpy archive.

    The meshes can be loaded later using load_meshes().

    Args:
        meshes: Buffers to save, e.g. the output of assemble_volume().
        path: Path for output file (typically .npz extension).

    Returns:
        Path to the written archive.

    Example:
        >>> from domainmesh.io import save_meshes, load_meshes
        >>> save_meshes(meshes, "output/volume.npz")
        >>> # Later:
        >>> meshes = load_meshes("output/volume.npz")
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    arrays = {"names": np.array([_mesh_name(m, i) for i, m in enumerate(meshes)])}
    for i, mesh in enumerate(meshes):
        arrays[f"positions_{i}"] = mesh.positions
        arrays[f"normals_{i}"] = mesh.normals
        arrays[f"indices_{i}"] = mesh.indices

    with open(path, "wb") as f:
        np.savez_compressed(f, **arrays)
    logger.debug("Saved %d meshes to %s", len(meshes), path)
    return path


def write_msh(
    meshes: Sequence[MeshBuffer],
    path: str | Path,
    mesh_format: str = "msh2",
) -> Path:
    """Write mesh buffers to a gmsh mesh file.

    Every buffer becomes a discrete surface with its own physical group named
    after the buffer. Vertices are not shared between buffers.

    Args:
        meshes: Buffers to write.
        path: Path for output mesh file.
        mesh_format: Gmsh mesh format version ('msh2' or 'msh4'). Default: 'msh2'.

    Returns:
        Path to the written mesh file.

    Raises:
        ValueError: If mesh_format is not supported.
        MeshGenerationError: If gmsh fails to write the file.
    """
    # gmsh loads native libraries; keep them out of the npz-only import path
    import gmsh

    if mesh_format not in _MSH_VERSIONS:
        raise ValueError(
            f"Unknown mesh format: {mesh_format}. Supported: 'msh2', 'msh4'"
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    gmsh.initialize()
    try:
        # Suppress terminal output
        gmsh.option.setNumber("General.Terminal", 0)

        gmsh.option.setNumber("Mesh.MshFileVersion", _MSH_VERSIONS[mesh_format])

        gmsh.model.add("domainmesh")

        node_offset = 0
        for i, mesh in enumerate(meshes):
            tag = gmsh.model.addDiscreteEntity(2)

            node_tags = np.arange(node_offset + 1, node_offset + mesh.n_vertices + 1)
            gmsh.model.mesh.addNodes(
                2, tag, node_tags.tolist(), mesh.positions.ravel().tolist()
            )
            if mesh.n_triangles:
                # Element type 2 is the 3-node triangle; gmsh tags are 1-based
                gmsh.model.mesh.addElementsByType(
                    tag, 2, [], (mesh.indices + node_offset + 1).ravel().tolist()
                )

            group = gmsh.model.addPhysicalGroup(2, [tag])
            gmsh.model.setPhysicalName(2, group, _mesh_name(mesh, i))
            node_offset += mesh.n_vertices

        gmsh.write(str(path))

    except Exception as e:
        raise MeshGenerationError(f"Writing {path} failed: {e}") from e

    finally:
        gmsh.finalize()

    logger.info("Wrote %d meshes (%d nodes) to %s", len(meshes), node_offset, path)
    return path
