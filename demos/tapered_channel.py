"""
Tapered Channel Meshing Demo

This script demonstrates using domainmesh to mesh a channel whose width
shrinks along x and whose floor undulates, then carves out its lower half
and writes both results to disk.

Usage:
    python tapered_channel.py

The script will:
1. Define the channel as six boundary functions
2. Build the adaptive footprint grid and the six boundary meshes
3. Mesh the lower half of the channel via fractional ranges
4. Save the meshes to a numpy archive and a gmsh .msh file
"""

import math
from pathlib import Path

from domainmesh import Domain, VolumeBuilder
from domainmesh.io import save_meshes, write_msh
from domainmesh.logging_config import setup_logging


def main():
    setup_logging()

    # Channel 10 units long, 4 wide at the inlet narrowing to 1 at the outlet
    length = 10.0
    domain = Domain(
        x=(lambda: 0.0, lambda: length),
        z=(lambda x: -2.0 + 0.15 * x, lambda x: 2.0 - 0.15 * x),
        y=(
            lambda x, z: 0.3 * math.sin(x) * math.cos(z),
            lambda x, z: 3.0,
        ),
    )

    density = 4

    print("Meshing tapered channel...")
    print(f"  Density: {density} samples per unit")

    builder = VolumeBuilder(domain).set_density(density)
    meshes = builder.build(check_thickness=True)

    info = builder.get_mesh_info()
    print("\nMeshes generated successfully:")
    print(f"  Footprint area: {info['footprint_area']:.2f}")
    print(f"  Number of vertices: {info['n_vertices']}")
    print(f"  Number of triangles: {info['n_triangles']}")
    for name, n_triangles in info["meshes"].items():
        print(f"    {name}: {n_triangles} triangles")

    # Lower half of the channel
    lower_half = (
        VolumeBuilder(domain)
        .set_density(density)
        .set_ranges({"y": [0.0, 0.5]})
        .build()
    )

    output_dir = Path(__file__).parent / "output"
    save_meshes(meshes, output_dir / "tapered_channel.npz")
    save_meshes(lower_half, output_dir / "tapered_channel_lower.npz")
    msh_path = write_msh(meshes, output_dir / "tapered_channel.msh")
    print(f"\nMeshes saved to: {output_dir}")
    print(f"  gmsh file: {msh_path.name}")

    return meshes


if __name__ == "__main__":
    main()
