"""
PATCH-TEST GEOMETRY
===================

Writes the five-region patch-test geometry as a Gmsh .geo file and,
with --mesh, meshes it through the Gmsh API (needs the `mesh` extra).

EXAMPLE USAGE:
--------------
python demos/write_patch_test_geo.py --output artifacts/patch_test.geo
python demos/write_patch_test_geo.py --nodes-per-edge 3 --mesh
"""

import argparse

from fe_worksheets.config import CONFIG
from fe_worksheets.mesh import patch_test_geometry, build_gmsh_model


def main():
    parser = argparse.ArgumentParser(description='Write the patch-test geometry')
    parser.add_argument('--output', type=str, default='artifacts/patch_test.geo',
                        help='Path of the .geo file (default: artifacts/patch_test.geo)')
    parser.add_argument('--nodes-per-edge', type=int, default=CONFIG.patch_nodes_per_edge,
                        help=f'Transfinite nodes per line (default: {CONFIG.patch_nodes_per_edge})')
    parser.add_argument('--mesh', action='store_true', help='Also mesh with the Gmsh API and write .msh')
    args = parser.parse_args()

    geometry = patch_test_geometry(nodes_per_edge=args.nodes_per_edge)
    path = geometry.write_geo(args.output)

    print("=" * 70)
    print("PATCH TEST GEOMETRY")
    print("=" * 70)
    print(f"points: {len(geometry.points)}   lines: {len(geometry.lines)}   surfaces: {len(geometry.surfaces)}")
    for tag, surface in geometry.surfaces.items():
        print(f"  S{tag} {surface.name:7s} area = {geometry.surface_area(tag):.6f}")
    print(f"  total area = {geometry.total_area():.6f}")
    print(f"Saved: {path}")

    if args.mesh:
        import gmsh

        gmsh.initialize()
        try:
            build_gmsh_model(geometry)
            gmsh.model.mesh.generate(2)
            msh = path.with_suffix('.msh')
            gmsh.write(str(msh))
            print(f"Saved: {msh}")
        finally:
            gmsh.finalize()


if __name__ == "__main__":
    main()
