"""I/O utilities for saving and loading meshes."""

from domainmesh.io.readers import load_meshes
from domainmesh.io.writers import save_meshes, write_msh

__all__ = [
    "load_meshes",
    "save_meshes",
    "write_msh",
]
