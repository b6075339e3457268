"""Mesh generation utilities."""

from domainmesh.mesh.buffer import MeshBuffer, merge_meshes
from domainmesh.mesh.builder import VolumeBuilder
from domainmesh.mesh.config import SamplingConfig
from domainmesh.mesh.surface import mesh_surface
from domainmesh.mesh.validation import validate_domain_thickness, validate_mesh
from domainmesh.mesh.volume import BOUNDARY_NAMES, assemble_grid_volume, assemble_volume
from domainmesh.mesh.walls import knit, mesh_wall

__all__ = [
    "MeshBuffer",
    "merge_meshes",
    "VolumeBuilder",
    "SamplingConfig",
    "mesh_surface",
    "mesh_wall",
    "knit",
    "BOUNDARY_NAMES",
    "assemble_volume",
    "assemble_grid_volume",
    "validate_mesh",
    "validate_domain_thickness",
]
