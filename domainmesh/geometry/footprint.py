"""Adaptive triangulated grid over the (x, z) footprint of a domain."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon

from domainmesh.exceptions import DomainError

if TYPE_CHECKING:
    from domainmesh.geometry.domain import Domain

logger = logging.getLogger(__name__)

DEFAULT_DENSITY = 4.0


class FootprintGrid:
    """Column-wise triangulated grid over a domain footprint.

    Vertices are stored column-major: column ``i`` sits at ``x[i]`` and owns
    ``counts[i]`` consecutive entries of the flattened ``z`` array. Columns
    may hold different numbers of rows.

    Args:
        x: Column x-coordinates, shape (n_columns,).
        z: Flattened z-coordinates of all columns, shape (n_vertices,).
        counts: Number of rows per column, shape (n_columns,).
        indices: Triangle vertex indices, shape (n_triangles, 3).

    Raises:
        ValueError: If the arrays are inconsistent.
    """

    def __init__(
        self,
        x: np.ndarray,
        z: np.ndarray,
        counts: np.ndarray,
        indices: np.ndarray,
    ):
        self._x = np.asarray(x, dtype=float)
        self._z = np.asarray(z, dtype=float)
        self._counts = np.asarray(counts, dtype=np.int64)
        self._indices = np.asarray(indices, dtype=np.int64).reshape(-1, 3)

        if self._x.ndim != 1 or self._counts.shape != self._x.shape:
            raise ValueError("x and counts must be 1D arrays of equal length")
        if int(self._counts.sum()) != len(self._z):
            raise ValueError(
                f"counts sum ({int(self._counts.sum())}) must match "
                f"number of z samples ({len(self._z)})"
            )
        if len(self._indices) and (
            self._indices.min() < 0 or self._indices.max() >= len(self._z)
        ):
            raise ValueError("triangle indices out of range")

        for arr in (self._x, self._z, self._counts, self._indices):
            arr.flags.writeable = False

    @property
    def x(self) -> np.ndarray:
        """Column x-coordinates."""
        return self._x

    @property
    def z(self) -> np.ndarray:
        """Flattened column-major z-coordinates."""
        return self._z

    @property
    def counts(self) -> np.ndarray:
        """Number of rows in each column."""
        return self._counts

    @property
    def indices(self) -> np.ndarray:
        """Triangle index triples, shape (n_triangles, 3)."""
        return self._indices

    @property
    def n_columns(self) -> int:
        return len(self._x)

    @property
    def n_vertices(self) -> int:
        return len(self._z)

    @property
    def n_triangles(self) -> int:
        return len(self._indices)

    @property
    def offsets(self) -> np.ndarray:
        """Index of the first vertex of each column."""
        offsets = np.zeros(self.n_columns, dtype=np.int64)
        offsets[1:] = np.cumsum(self._counts)[:-1]
        return offsets

    @property
    def xz(self) -> np.ndarray:
        """Footprint coordinates of every vertex, shape (n_vertices, 2)."""
        return np.column_stack([np.repeat(self._x, self._counts), self._z])

    @property
    def depths(self) -> np.ndarray:
        """Absolute z-extent of each column."""
        return np.array(
            [abs(col[-1] - col[0]) if len(col) else 0.0 for col in self.columns()]
        )

    @property
    def is_flat(self) -> bool:
        """Return True if no column has any depth."""
        return not np.any(self.depths > 0.0)

    def column(self, i: int) -> np.ndarray:
        """Return the z-samples of column ``i`` (negative indices allowed)."""
        i = range(self.n_columns)[i]
        start = int(self.offsets[i])
        return self._z[start : start + int(self._counts[i])]

    def columns(self) -> list[np.ndarray]:
        """Return the z-samples of every column."""
        return np.split(self._z, np.cumsum(self._counts)[:-1])

    def outline(self) -> ShapelyPolygon:
        """Return the footprint boundary as a polygon in (x, z).

        The ring runs along the first sample of every column, up the last
        column, back along the last sample of every column and down the
        first column. A footprint with fewer than three distinct boundary
        points has no area and gives an empty polygon.
        """
        cols = self.columns()
        first = [(x, col[0]) for x, col in zip(self._x, cols)]
        last = [(x, col[-1]) for x, col in zip(self._x, cols)]
        ring = (
            first
            + [(self._x[-1], z) for z in cols[-1][1:-1]]
            + last[::-1]
            + [(self._x[0], z) for z in cols[0][-2:0:-1]]
        )
        if len(set(ring)) < 3:
            return ShapelyPolygon()
        return ShapelyPolygon(ring)

    def __repr__(self) -> str:
        return (
            f"FootprintGrid(n_columns={self.n_columns}, "
            f"n_vertices={self.n_vertices}, n_triangles={self.n_triangles})"
        )


def _sample_count(extent: float, density: float) -> int:
    return math.ceil(abs(extent) * density) + 1


def _step(extent: float, n: int) -> float:
    # A single sample has no spacing; avoid 0/0.
    return extent / (n - 1) if n > 1 else 0.0


def _finite(value: float, what: str) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise DomainError(f"{what} is not finite: {value}")
    return value


def build_grid(domain: Domain, density: float = DEFAULT_DENSITY) -> FootprintGrid:
    """Walk the domain footprint and triangulate it column by column.

    Each column gets ``ceil(depth * density) + 1`` evenly spaced rows, so
    neighbouring columns may differ in row count. Rows shared by both
    columns are joined with quads split into two triangles; surplus rows on
    either side are fanned onto the last vertex of the shorter column.

    Args:
        domain: Domain whose x and z boundaries define the footprint.
        density: Samples per unit length. Default: 4.

    Returns:
        FootprintGrid with vertex coordinates and triangle indices.

    Raises:
        ValueError: If density is not positive.
        DomainError: If a boundary evaluates to a non-finite value.
    """
    if not density > 0:
        raise ValueError("density must be positive")

    left = _finite(domain.x[0](), "left boundary")
    right = _finite(domain.x[1](), "right boundary")
    num_x = _sample_count(right - left, density)
    dx = _step(right - left, num_x)

    xs = np.empty(num_x)
    zs: list[float] = []
    counts = np.empty(num_x, dtype=np.int64)
    indices: list[tuple[int, int, int]] = []

    idx = 0
    for i in range(num_x):
        x = left + i * dx
        xs[i] = x

        back = _finite(domain.z[0](x), f"back boundary at x={x}")
        front = _finite(domain.z[1](x), f"front boundary at x={x}")
        num_z = _sample_count(front - back, density)
        counts[i] = num_z
        dz = _step(front - back, num_z)

        for k in range(num_z):
            zs.append(back + k * dz)

            if i > 0:
                last_num_z = int(counts[i - 1])
                if 0 < k < last_num_z:
                    top_left, bot_left = idx - last_num_z - 1, idx - last_num_z
                    top_right, bot_right = idx - 1, idx
                    indices.append((top_left, bot_left, top_right))
                    indices.append((top_right, bot_left, bot_right))
                elif k >= last_num_z:
                    # Current column is longer: fan onto previous column's end
                    indices.append((idx, idx - 1, idx - k - 1))

                if k == num_z - 1:
                    # Previous column is longer: fan its surplus onto this end
                    for j in range(last_num_z - num_z):
                        indices.append(
                            (idx, idx - last_num_z + j, idx - last_num_z + j + 1)
                        )

            idx += 1

    logger.debug(
        "Footprint grid: %d columns, %d vertices, %d triangles (density=%g)",
        num_x,
        idx,
        len(indices),
        density,
    )
    return FootprintGrid(xs, np.array(zs), counts, np.array(indices, dtype=np.int64))
