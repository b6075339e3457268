"""domainmesh - triangle meshes for functionally defined volumes.

A domain is a 3D region bounded by six functions: two constant x bounds,
two z bounds depending on x and two y heights depending on (x, z). This
package samples its footprint adaptively and produces render-ready
triangle buffers for the two height surfaces and four vertical walls.

Example:
    >>> from domainmesh import Domain, VolumeBuilder
    >>> domain = Domain(
    ...     x=(lambda: 0.0, lambda: 4.0),
    ...     z=(lambda x: 0.0, lambda x: 1.0 + 0.25 * x),
    ...     y=(lambda x, z: 0.0, lambda x, z: 1.0 + 0.1 * x),
    ... )
    >>> meshes = VolumeBuilder(domain).set_density(4).build()
    >>> from domainmesh.io import save_meshes
    >>> save_meshes(meshes, "volume.npz")
"""

from domainmesh.exceptions import (
    DataLoadError,
    DegenerateDomainError,
    DomainError,
    DomainMeshError,
    MeshGenerationError,
)
from domainmesh.geometry import (
    Domain,
    FootprintGrid,
    Ranges,
    build_grid,
    interpolate_domain,
)
from domainmesh.mesh import (
    MeshBuffer,
    SamplingConfig,
    VolumeBuilder,
    assemble_volume,
    knit,
    mesh_surface,
    mesh_wall,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Domain",
    "Ranges",
    "VolumeBuilder",
    "SamplingConfig",
    "assemble_volume",
    # Building blocks
    "interpolate_domain",
    "build_grid",
    "FootprintGrid",
    "MeshBuffer",
    "mesh_surface",
    "mesh_wall",
    "knit",
    # Exceptions
    "DomainMeshError",
    "DomainError",
    "DegenerateDomainError",
    "MeshGenerationError",
    "DataLoadError",
]
