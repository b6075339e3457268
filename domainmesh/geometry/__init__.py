"""Domain definition and footprint sampling."""

from domainmesh.geometry.domain import Domain, Ranges, interpolate_domain
from domainmesh.geometry.footprint import FootprintGrid, build_grid

__all__ = ["Domain", "Ranges", "interpolate_domain", "FootprintGrid", "build_grid"]
