"""Height-field surface meshing over a footprint grid."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

import numpy as np

from domainmesh.exceptions import MeshGenerationError
from domainmesh.mesh.buffer import MeshBuffer

if TYPE_CHECKING:
    from domainmesh.geometry.footprint import FootprintGrid

DEFAULT_EPS = 1e-3


def normalize_rows(vectors: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Normalize each row of ``vectors``.

    Args:
        vectors: Array of shape (n, 3).

    Returns:
        Tuple of (unit vectors, valid mask). Rows of zero length are left as
        zeros and flagged False in the mask.
    """
    lengths = np.linalg.norm(vectors, axis=1)
    valid = lengths > 0.0
    units = np.zeros_like(vectors)
    units[valid] = vectors[valid] / lengths[valid, None]
    return units, valid


def evaluate_height(
    func: Callable[[float, float], float], x: float, z: float
) -> float:
    """Evaluate a height function, rejecting NaN and infinities."""
    y = float(func(x, z))
    if not math.isfinite(y):
        raise MeshGenerationError(f"Height is not finite at (x={x}, z={z}): {y}")
    return y


def mesh_surface(
    height_fn: Callable[[float, float], float],
    grid: FootprintGrid,
    eps: float = DEFAULT_EPS,
    name: str | None = None,
) -> MeshBuffer:
    """Lift a footprint grid onto the surface ``y = height_fn(x, z)``.

    Normals come from forward differences: the offsets ``(0, dy_z, eps)``
    and ``(eps, dy_x, 0)`` are crossed in that order, which points the
    normal towards +y and matches the grid's winding.

    Args:
        height_fn: Height as a function of (x, z).
        grid: Footprint grid; its triangles are reused unchanged.
        eps: Finite-difference step. Default: 1e-3.
        name: Optional name for the buffer.

    Returns:
        MeshBuffer with one vertex per grid vertex.

    Raises:
        MeshGenerationError: If the height function returns a non-finite value.
    """
    positions = np.empty((grid.n_vertices, 3))
    dx_offsets = np.zeros((grid.n_vertices, 3))
    dz_offsets = np.zeros((grid.n_vertices, 3))
    dx_offsets[:, 0] = eps
    dz_offsets[:, 2] = eps

    for idx, (x, z) in enumerate(grid.xz):
        y = evaluate_height(height_fn, x, z)
        positions[idx] = (x, y, z)
        dx_offsets[idx, 1] = evaluate_height(height_fn, x + eps, z) - y
        dz_offsets[idx, 1] = evaluate_height(height_fn, x, z + eps) - y

    normals, _ = normalize_rows(np.cross(dz_offsets, dx_offsets))
    return MeshBuffer(positions, normals, grid.indices, name=name)
