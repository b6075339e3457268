"""Readers for saved mesh archives."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from domainmesh.exceptions import DataLoadError
from domainmesh.mesh.buffer import MeshBuffer


def load_meshes(path: str | Path) -> list[MeshBuffer]:
    """Load mesh buffers written by save_meshes().

    Args:
        path: Path to the .npz archive.

    Returns:
        List of MeshBuffers in their saved order.

    Raises:
        DataLoadError: If file cannot be read or is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise DataLoadError(f"File not found: {path}")

    try:
        with np.load(path, allow_pickle=False) as data:
            names = [str(name) for name in data["names"]]
            return [
                MeshBuffer(
                    data[f"positions_{i}"],
                    data[f"normals_{i}"],
                    data[f"indices_{i}"],
                    name=name,
                )
                for i, name in enumerate(names)
            ]

    except Exception as e:
        raise DataLoadError(f"Failed to read mesh archive {path}: {e}") from e
