"""Assembly of the six boundary meshes enclosing a domain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domainmesh.exceptions import DegenerateDomainError
from domainmesh.geometry.footprint import DEFAULT_DENSITY, FootprintGrid, build_grid
from domainmesh.mesh.buffer import MeshBuffer
from domainmesh.mesh.surface import DEFAULT_EPS, mesh_surface
from domainmesh.mesh.walls import mesh_wall

if TYPE_CHECKING:
    from domainmesh.geometry.domain import Domain

logger = logging.getLogger(__name__)

BOUNDARY_NAMES = ("y_low", "y_high", "z_low", "z_high", "x_low", "x_high")


def check_depth(grid: FootprintGrid) -> None:
    """Raise DegenerateDomainError if the grid cannot carry vertical walls."""
    if not grid.n_columns or grid.counts[-1] == 0:
        raise DegenerateDomainError(
            "The mesh has zero depth, there should be at least one vertex"
        )
    if grid.is_flat:
        raise DegenerateDomainError(
            "The domain has zero depth in every column of its footprint"
        )


def assemble_grid_volume(
    domain: Domain,
    grid: FootprintGrid,
    eps: float = DEFAULT_EPS,
) -> list[MeshBuffer]:
    """Mesh the six boundaries of ``domain`` over an existing grid.

    Args:
        domain: Domain to mesh.
        grid: Footprint grid built from the same domain.
        eps: Finite-difference step for normals. Default: 1e-3.

    Returns:
        Six MeshBuffers ordered as BOUNDARY_NAMES.

    Raises:
        DegenerateDomainError: If the footprint has no depth.
    """
    check_depth(grid)
    lower, upper = domain.y

    meshes = [
        mesh_surface(func, grid, eps=eps, name=name)
        for func, name in zip(domain.y, BOUNDARY_NAMES[0:2])
    ]

    for func, name in zip(domain.z, BOUNDARY_NAMES[2:4]):
        meshes.append(
            mesh_wall(
                lower,
                upper,
                lambda x, f=func: (x, f(x)),
                grid.x,
                eps=eps,
                name=name,
            )
        )

    x_walls = zip(domain.x, (grid.column(0), grid.column(-1)), BOUNDARY_NAMES[4:6])
    for func, samples, name in x_walls:
        x_fixed = float(func())
        meshes.append(
            mesh_wall(
                lower,
                upper,
                lambda z, x=x_fixed: (x, z),
                samples,
                eps=eps,
                name=name,
            )
        )

    logger.info(
        "Assembled volume: %d vertices, %d triangles in %d meshes",
        sum(m.n_vertices for m in meshes),
        sum(m.n_triangles for m in meshes),
        len(meshes),
    )
    return meshes


def assemble_volume(
    domain: Domain,
    density: float = DEFAULT_DENSITY,
    eps: float = DEFAULT_EPS,
) -> list[MeshBuffer]:
    """Build the footprint grid and mesh all six boundaries of a domain.

    The order is fixed: y-low surface, y-high surface, z-low wall,
    z-high wall, x-low wall, x-high wall.

    Args:
        domain: Domain to mesh.
        density: Footprint samples per unit length. Default: 4.
        eps: Finite-difference step for normals. Default: 1e-3.

    Returns:
        List of six MeshBuffers.

    Raises:
        DegenerateDomainError: If the footprint has no depth.
    """
    grid = build_grid(domain, density)
    return assemble_grid_volume(domain, grid, eps=eps)
