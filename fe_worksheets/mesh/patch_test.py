# fe_worksheets/mesh/patch_test.py
"""
PATCH-TEST GEOMETRY
===================

The classic distorted-quadrilateral patch: a 0.24 x 0.12 rectangle with
four interior points, split into five four-sided regions.

        4 ───────────────────────── 3
        │ ╲         S3          ╱   │
        │   8 ─────────────── 7     │
        │S4 │        S5       │ S2  │
        │   5 ─────────────── 6     │
        │ ╱         S1          ╲   │
        1 ───────────────────────── 2

(The interior quad is distorted; the sketch is not to scale.)

This module only DESCRIBES the domain: points, lines, curve loops and
the meshing directives (transfinite curves, transfinite + recombined
surfaces so each region becomes a structured quad patch). The meshing
itself is Gmsh's job. `to_geo()` writes the .geo input file;
`build_gmsh_model()` hands the same data to the Gmsh Python API.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..config import CONFIG

RECTANGLE = (0.24, 0.12)
INTERIOR_POINTS = ((0.04, 0.02), (0.18, 0.03), (0.16, 0.08), (0.08, 0.08))


@dataclass(frozen=True)
class GeoPoint:
    tag: int
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class GeoLine:
    tag: int
    start: int
    end: int


@dataclass(frozen=True)
class GeoSurface:
    """
    Plane surface bounded by one curve loop.
    loop: signed line tags; a negative tag traverses the line end → start.
    """
    tag: int
    loop: Tuple[int, ...]
    name: str = ""


@dataclass
class PatchTestGeometry:
    """Points, lines, surfaces and meshing directives for the patch test."""
    points: Dict[int, GeoPoint]
    lines: Dict[int, GeoLine]
    surfaces: Dict[int, GeoSurface]
    nodes_per_edge: int = 2
    mesh_size: float = 0.05
    boundary: Dict[str, List[int]] = field(default_factory=dict)

    def loop_points(self, tag: int) -> List[int]:
        """Point tags around a surface, in loop order (start point of each edge)."""
        result = []
        for signed in self.surfaces[tag].loop:
            line = self.lines[abs(signed)]
            result.append(line.start if signed > 0 else line.end)
        return result

    def quad_coords(self, tag: int) -> List[Tuple[float, float]]:
        """Corner coordinates of a surface, usable as Q4 node coordinates."""
        return [(self.points[p].x, self.points[p].y) for p in self.loop_points(tag)]

    def surface_area(self, tag: int) -> float:
        """Shoelace area; positive for a counter-clockwise loop."""
        xy = self.quad_coords(tag)
        area = 0.0
        for (x1, y1), (x2, y2) in zip(xy, xy[1:] + xy[:1]):
            area += x1 * y2 - x2 * y1
        return 0.5 * area

    def validate(self) -> None:
        """
        Check every loop is closed and counter-clockwise.

        Raises:
            ValueError: open loop, unknown line tag, clockwise or degenerate surface
        """
        if self.nodes_per_edge < 2:
            raise ValueError(f"nodes_per_edge must be >= 2, got {self.nodes_per_edge}")
        for tag, surface in self.surfaces.items():
            for signed in surface.loop:
                if abs(signed) not in self.lines:
                    raise ValueError(f"Surface {tag} references unknown line {abs(signed)}")
            ends = []
            for signed in surface.loop:
                line = self.lines[abs(signed)]
                ends.append((line.start, line.end) if signed > 0 else (line.end, line.start))
            for (_, end), (start, _) in zip(ends, ends[1:] + ends[:1]):
                if end != start:
                    raise ValueError(f"Curve loop of surface {tag} is not closed at point {end}")
            if self.surface_area(tag) <= 0.0:
                raise ValueError(f"Surface {tag} is clockwise or degenerate")

    def total_area(self) -> float:
        return sum(self.surface_area(tag) for tag in self.surfaces)

    def to_geo(self) -> str:
        """Gmsh .geo text for the geometry and its meshing directives."""
        self.validate()
        out = [
            "// Patch test: 0.24 x 0.12 rectangle, five quadrilateral regions",
            f"lc = {self.mesh_size};",
            "",
        ]
        for p in self.points.values():
            out.append(f"Point({p.tag}) = {{{p.x}, {p.y}, {p.z}, lc}};")
        out.append("")
        for line in self.lines.values():
            out.append(f"Line({line.tag}) = {{{line.start}, {line.end}}};")
        out.append("")
        for s in self.surfaces.values():
            loop = ", ".join(str(t) for t in s.loop)
            out.append(f"Curve Loop({s.tag}) = {{{loop}}};")
            out.append(f"Plane Surface({s.tag}) = {{{s.tag}}};")
        out.append("")
        line_tags = ", ".join(str(t) for t in self.lines)
        surface_tags = ", ".join(str(t) for t in self.surfaces)
        out.append(f"Transfinite Curve {{{line_tags}}} = {self.nodes_per_edge} Using Progression 1;")
        out.append(f"Transfinite Surface {{{surface_tags}}};")
        out.append(f"Recombine Surface {{{surface_tags}}};")
        out.append("")
        for name, tags in self.boundary.items():
            out.append(f'Physical Curve("{name}") = {{{", ".join(str(t) for t in tags)}}};')
        out.append(f'Physical Surface("patch") = {{{surface_tags}}};')
        return "\n".join(out) + "\n"

    def write_geo(self, path) -> Path:
        """Write the .geo file, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_geo())
        return path


def patch_test_geometry(nodes_per_edge: Optional[int] = None,
                        mesh_size: Optional[float] = None) -> PatchTestGeometry:
    """
    Build the five-region patch-test geometry.

    Point tags: 1-4 outer corners (counter-clockwise from the origin),
    5-8 interior points. Lines: 1-4 outer edges, 5-8 interior quad edges,
    9-12 connectors from corner i to interior point i + 4.
    """
    width, height = RECTANGLE
    corners = ((0.0, 0.0), (width, 0.0), (width, height), (0.0, height))

    points = {}
    for i, (x, y) in enumerate(corners + INTERIOR_POINTS, start=1):
        points[i] = GeoPoint(i, x, y)

    lines = {}
    for i in range(4):
        # Outer edge i+1 and interior edge i+5, both counter-clockwise
        lines[i + 1] = GeoLine(i + 1, i + 1, (i + 1) % 4 + 1)
        lines[i + 5] = GeoLine(i + 5, i + 5, (i + 1) % 4 + 5)
        lines[i + 9] = GeoLine(i + 9, i + 1, i + 5)

    surfaces = {}
    names = ('bottom', 'right', 'top', 'left')
    for i in range(4):
        # Outer edge, connector out of its end, interior edge backwards, connector back
        nxt = (i + 1) % 4
        loop = (i + 1, nxt + 9, -(i + 5), -(i + 9))
        surfaces[i + 1] = GeoSurface(i + 1, loop, names[i])
    surfaces[5] = GeoSurface(5, (5, 6, 7, 8), 'center')

    geometry = PatchTestGeometry(
        points=points,
        lines=lines,
        surfaces=surfaces,
        nodes_per_edge=nodes_per_edge if nodes_per_edge is not None else CONFIG.patch_nodes_per_edge,
        mesh_size=mesh_size if mesh_size is not None else CONFIG.patch_mesh_size,
        boundary={'bottom': [1], 'right': [2], 'top': [3], 'left': [4]},
    )
    geometry.validate()
    return geometry


def build_gmsh_model(geometry: PatchTestGeometry, name: str = "patch_test"):
    """
    Create the geometry in the Gmsh API (built-in kernel) with the same
    transfinite / recombine directives. Gmsh must already be initialized;
    the caller generates, writes and finalizes.

    Requires the optional `gmsh` package (pip install fe_worksheets[mesh]).
    """
    import gmsh

    geometry.validate()
    gmsh.model.add(name)
    geo = gmsh.model.geo

    for p in geometry.points.values():
        geo.addPoint(p.x, p.y, p.z, geometry.mesh_size, p.tag)
    for line in geometry.lines.values():
        geo.addLine(line.start, line.end, line.tag)
    for s in geometry.surfaces.values():
        geo.addCurveLoop(list(s.loop), s.tag)
        geo.addPlaneSurface([s.tag], s.tag)

    for tag in geometry.lines:
        geo.mesh.setTransfiniteCurve(tag, geometry.nodes_per_edge)
    for tag in geometry.surfaces:
        geo.mesh.setTransfiniteSurface(tag)
        geo.mesh.setRecombine(2, tag)

    geo.synchronize()

    for label, tags in geometry.boundary.items():
        gmsh.model.addPhysicalGroup(1, tags, name=label)
    gmsh.model.addPhysicalGroup(2, list(geometry.surfaces), name="patch")
    return gmsh.model
