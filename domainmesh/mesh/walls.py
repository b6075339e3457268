"""Vertical wall meshing by knitting two boundary rings together."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

import numpy as np

from domainmesh.exceptions import MeshGenerationError
from domainmesh.mesh.buffer import MeshBuffer
from domainmesh.mesh.surface import DEFAULT_EPS, evaluate_height, normalize_rows

logger = logging.getLogger(__name__)

UP = np.array([0.0, 1.0, 0.0])


def knit(
    ring_a: np.ndarray | Sequence,
    ring_b: np.ndarray | Sequence,
    normals: np.ndarray | Sequence,
    name: str | None = None,
) -> MeshBuffer:
    """Join two parallel vertex rings with a triangle strip.

    Vertex ``i`` of ``ring_a`` faces vertex ``i`` of ``ring_b`` and both share
    ``normals[i]``. Output vertices are ``ring_a`` followed by ``ring_b``.

    Rings with fewer than two vertices give a strip with no triangles.
    With ``ring_a`` above ``ring_b`` and normals taken as tangent x up, the
    triangle front faces point opposite to the vertex normals.

    Args:
        ring_a: First ring, shape (n, 3).
        ring_b: Second ring, shape (n, 3).
        normals: Per-pair normals, shape (n, 3).
        name: Optional name for the buffer.

    Returns:
        MeshBuffer with 2n vertices and 2(n - 1) triangles.

    Raises:
        ValueError: If the rings and normals differ in length.
    """
    ring_a = np.asarray(ring_a, dtype=float).reshape(-1, 3)
    ring_b = np.asarray(ring_b, dtype=float).reshape(-1, 3)
    normals = np.asarray(normals, dtype=float).reshape(-1, 3)

    n = len(ring_a)
    if len(ring_b) != n or len(normals) != n:
        raise ValueError(
            f"rings and normals must have equal length, got "
            f"{len(ring_a)}, {len(ring_b)} and {len(normals)}"
        )
    if n < 2:
        logger.debug("Knitting %d-vertex rings yields an empty strip", n)

    i = np.arange(max(n - 1, 0))
    first = np.column_stack([i, i + 1, i + n])
    second = np.column_stack([i + n, i + 1, i + n + 1])
    indices = np.stack([first, second], axis=1).reshape(-1, 3)

    return MeshBuffer(
        np.concatenate([ring_a, ring_b]),
        np.concatenate([normals, normals]),
        indices,
        name=name,
    )


def _fill_degenerate(normals: np.ndarray, valid: np.ndarray) -> np.ndarray:
    """Copy the nearest valid normal onto rows flagged invalid."""
    if valid.all():
        return normals
    good = np.flatnonzero(valid)
    if not len(good):
        raise MeshGenerationError("Wall curve has no direction at any sample")
    rows = np.arange(len(normals))
    nearest = good[np.argmin(np.abs(rows[:, None] - good[None, :]), axis=1)]
    return normals[nearest]


def mesh_wall(
    lower_fn: Callable[[float, float], float],
    upper_fn: Callable[[float, float], float],
    curve: Callable[[float], tuple[float, float]],
    samples: np.ndarray | Sequence[float],
    eps: float = DEFAULT_EPS,
    name: str | None = None,
) -> MeshBuffer:
    """Mesh a vertical wall standing on a footprint curve.

    At each parameter ``u`` the wall spans from ``lower_fn`` to ``upper_fn``
    above ``curve(u)``. The normal is the horizontal tangent
    ``curve(u + eps) - curve(u)`` crossed with +y.
    The upper ring is knitted first, so triangle front faces point
    opposite to the vertex normals.

    Args:
        lower_fn: Lower height as a function of (x, z).
        upper_fn: Upper height as a function of (x, z).
        curve: Maps a parameter to a footprint point (x, z).
        samples: Parameter values to sample.
        eps: Finite-difference step for the tangent. Default: 1e-3.
        name: Optional name for the buffer.

    Returns:
        MeshBuffer knitted from the upper and lower rings.

    Raises:
        MeshGenerationError: If heights are not finite or the curve never
            moves.
    """
    samples = np.asarray(samples, dtype=float).ravel()
    upper = np.empty((len(samples), 3))
    lower = np.empty((len(samples), 3))
    tangents = np.zeros((len(samples), 3))

    for i, u in enumerate(samples):
        x, z = (float(c) for c in curve(u))
        upper[i] = (x, evaluate_height(upper_fn, x, z), z)
        lower[i] = (x, evaluate_height(lower_fn, x, z), z)

        x1, z1 = (float(c) for c in curve(u + eps))
        tangents[i, 0] = x1 - x
        tangents[i, 2] = z1 - z

    normals, valid = normalize_rows(np.cross(tangents, UP))
    if len(samples):
        normals = _fill_degenerate(normals, valid)

    return knit(upper, lower, normals, name=name)
