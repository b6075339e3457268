"""Immutable triangle mesh buffers handed to renderers."""

from __future__ import annotations

from typing import Sequence

import numpy as np


class MeshBuffer:
    """Triangle mesh with per-vertex normals.

    Arrays are copied on construction and made read-only; a buffer never
    changes after it has been produced.

    Args:
        positions: Vertex positions, shape (n, 3) or flat (3n,).
        normals: Unit vertex normals, same shape as positions.
        indices: Triangle vertex indices, shape (m, 3) or flat (3m,).
            Each triple is a counter-clockwise front face.
        name: Optional label (e.g. "y_low").

    Raises:
        ValueError: If the array shapes are inconsistent or an index does
            not reference a vertex.
    """

    def __init__(
        self,
        positions: np.ndarray | Sequence,
        normals: np.ndarray | Sequence,
        indices: np.ndarray | Sequence,
        name: str | None = None,
    ):
        self._positions = np.array(positions, dtype=float).reshape(-1, 3)
        self._normals = np.array(normals, dtype=float).reshape(-1, 3)
        self._indices = np.array(indices, dtype=np.int64).reshape(-1, 3)
        self._name = name

        if self._normals.shape != self._positions.shape:
            raise ValueError(
                f"normals shape {self._normals.shape} must match "
                f"positions shape {self._positions.shape}"
            )
        if len(self._indices) and (
            self._indices.min() < 0 or self._indices.max() >= len(self._positions)
        ):
            raise ValueError(
                f"triangle indices outside [0, {len(self._positions)})"
            )

        for arr in (self._positions, self._normals, self._indices):
            arr.flags.writeable = False

    @property
    def name(self) -> str | None:
        """Label of the buffer (e.g. "y_low")."""
        return self._name

    @property
    def positions(self) -> np.ndarray:
        """Vertex positions, shape (n_vertices, 3)."""
        return self._positions

    @property
    def normals(self) -> np.ndarray:
        """Vertex normals, shape (n_vertices, 3)."""
        return self._normals

    @property
    def indices(self) -> np.ndarray:
        """Triangle indices, shape (n_triangles, 3)."""
        return self._indices

    @property
    def n_vertices(self) -> int:
        return len(self._positions)

    @property
    def n_triangles(self) -> int:
        return len(self._indices)

    @property
    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (min, max) corners of the bounding box."""
        if not self.n_vertices:
            raise ValueError("Empty mesh has no bounds")
        return self._positions.min(axis=0), self._positions.max(axis=0)

    def flat(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return flat renderer buffers.

        Returns:
            Tuple of (positions, normals, indices) as 1D float32, float32 and
            uint32 arrays.
        """
        return (
            self._positions.astype(np.float32).ravel(),
            self._normals.astype(np.float32).ravel(),
            self._indices.astype(np.uint32).ravel(),
        )

    def __repr__(self) -> str:
        return (
            f"MeshBuffer(name={self.name!r}, n_vertices={self.n_vertices}, "
            f"n_triangles={self.n_triangles})"
        )


def merge_meshes(meshes: Sequence[MeshBuffer], name: str | None = None) -> MeshBuffer:
    """Concatenate buffers into one, offsetting triangle indices.

    Shared boundary vertices are not welded.

    Args:
        meshes: Buffers to merge.
        name: Name of the merged buffer.

    Returns:
        New MeshBuffer holding all vertices and triangles.
    """
    positions, normals, indices = [], [], []
    offset = 0
    for mesh in meshes:
        positions.append(mesh.positions)
        normals.append(mesh.normals)
        indices.append(mesh.indices + offset)
        offset += mesh.n_vertices

    if not positions:
        return MeshBuffer(np.empty((0, 3)), np.empty((0, 3)), np.empty((0, 3)), name)

    return MeshBuffer(
        np.concatenate(positions),
        np.concatenate(normals),
        np.concatenate(indices),
        name=name,
    )
