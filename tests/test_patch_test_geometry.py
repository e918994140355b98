# File: tests/test_patch_test_geometry.py
"""
Patch-test geometry: five quadrilateral regions filling a 0.24 x 0.12 rectangle.

The Gmsh test only runs when the optional gmsh package is installed.
"""

import pytest

from fe_worksheets.mesh.patch_test import (
    GeoLine, GeoSurface, INTERIOR_POINTS, PatchTestGeometry, build_gmsh_model,
    patch_test_geometry,
)


def test_entity_counts():
    geometry = patch_test_geometry()
    assert len(geometry.points) == 8
    assert len(geometry.lines) == 12
    assert len(geometry.surfaces) == 5
    assert geometry.surfaces[5].name == 'center'


def test_regions_tile_the_rectangle():
    """Every region is counter-clockwise and the areas add up to 0.24 x 0.12."""
    geometry = patch_test_geometry()
    for tag in geometry.surfaces:
        assert geometry.surface_area(tag) > 0.0
    assert geometry.total_area() == pytest.approx(0.24 * 0.12)
    assert geometry.surface_area(5) == pytest.approx(0.006)


def test_loops_are_four_sided():
    geometry = patch_test_geometry()
    assert geometry.surfaces[1].loop == (1, 10, -5, -9)
    assert geometry.loop_points(1) == [1, 2, 6, 5]
    assert geometry.quad_coords(5) == list(INTERIOR_POINTS)
    for tag in geometry.surfaces:
        assert len(geometry.loop_points(tag)) == 4


def test_geo_text():
    geometry = patch_test_geometry(nodes_per_edge=3, mesh_size=0.02)
    text = geometry.to_geo()
    assert "lc = 0.02;" in text
    assert "Point(5) = {0.04, 0.02, 0.0, lc};" in text
    assert "Curve Loop(1) = {1, 10, -5, -9};" in text
    assert "Transfinite Curve {1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12} = 3 Using Progression 1;" in text
    assert "Transfinite Surface {1, 2, 3, 4, 5};" in text
    assert "Recombine Surface {1, 2, 3, 4, 5};" in text
    assert 'Physical Curve("left") = {4};' in text
    print("✓ .geo file carries transfinite and recombine directives")


def test_write_geo(tmp_path):
    path = patch_test_geometry().write_geo(tmp_path / "out" / "patch.geo")
    assert path.exists()
    assert path.read_text().startswith("// Patch test")


def test_validation_errors():
    geometry = patch_test_geometry()

    geometry.nodes_per_edge = 1
    with pytest.raises(ValueError, match="nodes_per_edge"):
        geometry.validate()
    geometry.nodes_per_edge = 2

    reversed_loop = dict(geometry.surfaces)
    reversed_loop[5] = GeoSurface(5, (-8, -7, -6, -5), 'center')
    clockwise = PatchTestGeometry(geometry.points, geometry.lines, reversed_loop)
    with pytest.raises(ValueError, match="clockwise"):
        clockwise.validate()

    open_loop = dict(geometry.surfaces)
    open_loop[5] = GeoSurface(5, (5, 6, 8, 7), 'center')
    with pytest.raises(ValueError, match="not closed"):
        PatchTestGeometry(geometry.points, geometry.lines, open_loop).validate()

    lines = dict(geometry.lines)
    del lines[12]
    with pytest.raises(ValueError, match="unknown line 12"):
        PatchTestGeometry(geometry.points, lines, geometry.surfaces).validate()


def test_geo_line_direction():
    line = GeoLine(9, 1, 5)
    assert (line.start, line.end) == (1, 5)


def test_gmsh_mesh_is_five_quads():
    gmsh = pytest.importorskip("gmsh")
    gmsh.initialize()
    try:
        gmsh.option.setNumber("General.Terminal", 0)
        build_gmsh_model(patch_test_geometry(nodes_per_edge=2))
        gmsh.model.mesh.generate(2)
        element_types, element_tags, _ = gmsh.model.mesh.getElements(dim=2)
        assert list(element_types) == [3]   # 4-node quadrangle
        assert len(element_tags[0]) == 5
        node_tags, _, _ = gmsh.model.mesh.getNodes()
        assert len(node_tags) == 8
    finally:
        gmsh.finalize()
