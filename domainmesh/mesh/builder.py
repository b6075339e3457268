"""High-level VolumeBuilder API for domain boundary meshing."""

from __future__ import annotations

import logging
from typing import Mapping

from domainmesh.exceptions import DomainMeshError, MeshGenerationError
from domainmesh.geometry.domain import Domain, Ranges, interpolate_domain
from domainmesh.geometry.footprint import FootprintGrid, build_grid
from domainmesh.mesh.buffer import MeshBuffer
from domainmesh.mesh.config import SamplingConfig
from domainmesh.mesh.validation import validate_domain_thickness, validate_mesh
from domainmesh.mesh.volume import assemble_grid_volume

logger = logging.getLogger(__name__)


class VolumeBuilder:
    """High-level API for turning a domain into renderable boundary meshes.

    Orchestrates the full workflow:
    1. Optionally carve a sub-domain with fractional ranges
    2. Build the adaptive footprint grid
    3. Mesh the two height-field surfaces and four vertical walls
    4. Validate the resulting buffers

    Args:
        domain: Domain to mesh.

    Example:
        >>> from domainmesh import Domain, VolumeBuilder
        >>> meshes = (
        ...     VolumeBuilder(Domain.box(x=(0, 2), z=(0, 1), y=(0, 1)))
        ...     .set_density(8)
        ...     .set_ranges({"y": [0.0, 0.5]})
        ...     .build()
        ... )
        >>> [m.name for m in meshes]
        ['y_low', 'y_high', 'z_low', 'z_high', 'x_low', 'x_high']
    """

    def __init__(self, domain: Domain):
        self._domain = domain
        self._config = SamplingConfig()
        self._ranges: Ranges | None = None

        # Generated objects (created during build)
        self._grid: FootprintGrid | None = None
        self._meshes: list[MeshBuffer] | None = None

    @property
    def domain(self) -> Domain:
        """Return the source domain."""
        return self._domain

    @property
    def config(self) -> SamplingConfig:
        """Return the sampling configuration."""
        return self._config

    @property
    def is_built(self) -> bool:
        """Return True once build() has succeeded."""
        return self._meshes is not None

    def set_density(self, density: float) -> VolumeBuilder:
        """Set footprint sampling density.

        Args:
            density: Samples per unit length.

        Returns:
            Self for method chaining.
        """
        self._config = SamplingConfig(density=density, eps=self._config.eps)
        return self

    def set_eps(self, eps: float) -> VolumeBuilder:
        """Set the finite-difference step used for normals.

        Args:
            eps: Step length.

        Returns:
            Self for method chaining.
        """
        self._config = SamplingConfig(density=self._config.density, eps=eps)
        return self

    def set_sampling_config(self, config: SamplingConfig) -> VolumeBuilder:
        """Set sampling configuration directly.

        Args:
            config: SamplingConfig object.

        Returns:
            Self for method chaining.
        """
        self._config = config
        return self

    def set_ranges(self, ranges: Ranges | Mapping) -> VolumeBuilder:
        """Restrict meshing to a sub-domain.

        Args:
            ranges: Ranges object or mapping such as ``{"x": [0.25, 0.75]}``.

        Returns:
            Self for method chaining.
        """
        if not isinstance(ranges, Ranges):
            ranges = Ranges.from_mapping(ranges)
        self._ranges = ranges
        return self

    def _target_domain(self) -> Domain:
        if self._ranges is None:
            return self._domain
        return interpolate_domain(self._domain, self._ranges)

    def build(
        self,
        validate: bool = True,
        check_thickness: bool = False,
        tolerance: float = 0.0,
    ) -> list[MeshBuffer]:
        """Build the six boundary meshes.

        Args:
            validate: If True, check every buffer with validate_mesh().
            check_thickness: If True, require the upper height to stay above
                the lower one at every grid vertex.
            tolerance: Allowed thickness deficit for check_thickness.

        Returns:
            Six MeshBuffers: y_low, y_high, z_low, z_high, x_low, x_high.

        Raises:
            DegenerateDomainError: If the footprint has no depth.
            MeshGenerationError: If validation fails.
        """
        domain = self._target_domain()
        logger.info("Building volume meshes with %r", self._config)

        grid = build_grid(domain, self._config.density)

        if check_thickness:
            is_valid, message = validate_domain_thickness(domain, grid, tolerance)
            if not is_valid:
                raise MeshGenerationError(f"Invalid domain: {message}")

        meshes = assemble_grid_volume(domain, grid, eps=self._config.eps)

        if validate:
            for mesh in meshes:
                is_valid, message = validate_mesh(mesh)
                if not is_valid:
                    raise MeshGenerationError(f"Invalid mesh: {message}")

        self._grid = grid
        self._meshes = meshes
        return meshes

    def get_grid(self) -> FootprintGrid | None:
        """Return the footprint grid (available after build)."""
        return self._grid

    def get_meshes(self) -> list[MeshBuffer] | None:
        """Return the built meshes (available after build)."""
        return self._meshes

    def get_mesh_info(self) -> dict:
        """Return information about the built meshes.

        Returns:
            Dictionary with sampling configuration and statistics.

        Raises:
            DomainMeshError: If build() has not been called yet.
        """
        if self._grid is None or self._meshes is None:
            raise DomainMeshError("Meshes have not been built yet. Call build() first.")

        outline = self._grid.outline()
        return {
            "density": self._config.density,
            "eps": self._config.eps,
            "n_columns": self._grid.n_columns,
            "footprint_area": outline.area,
            "footprint_bounds": outline.bounds,
            "n_vertices": sum(m.n_vertices for m in self._meshes),
            "n_triangles": sum(m.n_triangles for m in self._meshes),
            "meshes": {m.name: m.n_triangles for m in self._meshes},
        }
