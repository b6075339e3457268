"""Checks on generated meshes and domain thickness."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from domainmesh.geometry.domain import Domain
    from domainmesh.geometry.footprint import FootprintGrid
    from domainmesh.mesh.buffer import MeshBuffer


def validate_mesh(mesh: MeshBuffer, tolerance: float = 1e-4) -> tuple[bool, str]:
    """Validate a mesh buffer for rendering.

    Checks that:
    - Positions and normals contain no NaN or infinite values
    - Every normal has unit length (within tolerance)
    - No triangle repeats a vertex

    Args:
        mesh: Mesh buffer to check.
        tolerance: Allowed deviation of normal length from 1.

    Returns:
        Tuple of (is_valid, message).
    """
    label = mesh.name or "mesh"

    if np.any(~np.isfinite(mesh.positions)):
        return False, f"{label}: positions contain NaN or infinite values"
    if np.any(~np.isfinite(mesh.normals)):
        return False, f"{label}: normals contain NaN or infinite values"

    lengths = np.linalg.norm(mesh.normals, axis=1)
    bad_normals = np.abs(lengths - 1.0) > tolerance
    if np.any(bad_normals):
        return False, (
            f"{label}: {np.sum(bad_normals)} normals are not unit length"
        )

    indices = mesh.indices
    if len(indices):
        repeated = (
            (indices[:, 0] == indices[:, 1])
            | (indices[:, 1] == indices[:, 2])
            | (indices[:, 0] == indices[:, 2])
        )
        if np.any(repeated):
            return False, f"{label}: {np.sum(repeated)} triangles repeat a vertex"

    return True, f"{label} is valid"


def validate_domain_thickness(
    domain: Domain,
    grid: FootprintGrid,
    tolerance: float = 0.0,
) -> tuple[bool, str]:
    """Validate that the upper height stays above the lower one.

    Checks that:
    - Both height functions are finite at every grid vertex
    - upper >= lower (within tolerance) at every grid vertex

    Args:
        domain: Domain whose y pair is checked.
        grid: Footprint grid supplying the sample points.
        tolerance: Allowed amount of upper < lower (default: 0.0).

    Returns:
        Tuple of (is_valid, message).
    """
    lower_fn, upper_fn = domain.y
    xz = grid.xz
    lower = np.array([lower_fn(x, z) for x, z in xz], dtype=float)
    upper = np.array([upper_fn(x, z) for x, z in xz], dtype=float)

    if np.any(~np.isfinite(lower)):
        return False, "lower boundary contains NaN or infinite values"
    if np.any(~np.isfinite(upper)):
        return False, "upper boundary contains NaN or infinite values"

    thickness = upper - lower
    invalid_mask = thickness < -tolerance
    if np.any(invalid_mask):
        n_invalid = np.sum(invalid_mask)
        min_thickness = np.min(thickness)
        return False, (
            f"{n_invalid} points have upper boundary below lower boundary "
            f"(minimum thickness: {min_thickness:.4g})"
        )

    return True, "Domain thickness is valid"
