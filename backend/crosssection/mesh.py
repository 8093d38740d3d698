"""Triangulation result and its wireframe translation for display."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import Point2D

Point3 = tuple[float, float, float]
Edge = tuple[Point3, Point3]


@dataclass
class Mesh:
    """Linear triangle mesh: vertices plus triangles as vertex index triples."""

    vertices: list[Point2D] = field(default_factory=list)
    triangles: list[tuple[int, int, int]] = field(default_factory=list)


@dataclass
class MeshWireframe:
    points: list[Point3] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)


def translate_mesh(mesh: Mesh | None, deduplicate: bool = False) -> MeshWireframe:
    """Flatten ``mesh`` into display points at z=0 and triangle edges.

    Every triangle contributes its three edges, so an edge shared by two
    triangles appears twice unless ``deduplicate`` is set.
    """
    if mesh is None:
        return MeshWireframe()

    points: list[Point3] = [(v.x, v.y, 0.0) for v in mesh.vertices]
    edges: list[Edge] = []
    seen: set[tuple[int, int]] = set()

    for v0, v1, v2 in mesh.triangles:
        for a, b in ((v0, v1), (v1, v2), (v2, v0)):
            if deduplicate:
                key = (a, b) if a < b else (b, a)
                if key in seen:
                    continue
                seen.add(key)
            edges.append((points[a], points[b]))

    return MeshWireframe(points=points, edges=edges)
