"""Typed value objects for cross-section input."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .config import (
    DEFAULT_MINIMUM_ANGLE,
    DEFAULT_PLASTIC_AXIS_ACCURACY,
    DEFAULT_PLASTIC_AXIS_MAX_ITERATIONS,
    DEFAULT_ROUGHNESS,
)


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass(frozen=True)
class SectionMaterial:
    """Linear elastic material with a yield strength.

    Contours sharing an ``id`` are drawn and subtracted as one group.
    """

    name: str = "Default"
    id: int = 1
    elastic_modulus: float = 1.0
    poissons_ratio: float = 0.0
    yield_strength: float = 1.0


@dataclass(frozen=True)
class SectionContour:
    """Simple closed polygon, either an outer boundary or a hole.

    Outer contours carry a material, holes never do.
    """

    points: tuple[Point2D, ...]
    is_hole: bool = False
    material: SectionMaterial | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        if len(self.points) < 3:
            raise ValueError("A contour needs at least 3 points")
        if self.is_hole and self.material is not None:
            raise ValueError("A hole contour cannot carry a material")
        if not self.is_hole and self.material is None:
            raise ValueError("An outer contour requires a material")

    def coords(self) -> list[tuple[float, float]]:
        return [(p.x, p.y) for p in self.points]


@dataclass(frozen=True)
class SolutionSettings:
    """Meshing and analysis options for one solve pass.

    ``maximum_area`` and ``maximum_angle`` are unconstrained when 0. When no
    maximum area is given the mesh size is ``roughness`` times the total
    outer area.
    """

    roughness: float = DEFAULT_ROUGHNESS
    maximum_area: float = 0.0
    minimum_angle: float = DEFAULT_MINIMUM_ANGLE
    maximum_angle: float = 0.0
    conforming_delaunay: bool = True
    plastic_axis_accuracy: float = DEFAULT_PLASTIC_AXIS_ACCURACY
    plastic_axis_max_iterations: int = DEFAULT_PLASTIC_AXIS_MAX_ITERATIONS
    run_warping_analysis: bool = False
    run_plastic_analysis: bool = False

    def mesh_size(self, total_area: float) -> float:
        if self.maximum_area > 0:
            return self.maximum_area
        return self.roughness * total_area


@dataclass(frozen=True)
class BoundaryCurve:
    """Planar boundary curve as drawn by the user.

    A closed curve repeats its first vertex at the end. ``bulges`` holds one
    value per segment (0 for a straight segment, tan(theta / 4) for an arc
    of included angle theta); an empty tuple means all segments are straight.
    """

    vertices: tuple[tuple[float, float], ...]
    bulges: tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "vertices", tuple((float(x), float(y)) for x, y in self.vertices)
        )
        object.__setattr__(self, "bulges", tuple(float(b) for b in self.bulges))
        if self.bulges and len(self.bulges) != max(len(self.vertices) - 1, 0):
            raise ValueError("Expected one bulge per segment")

    @classmethod
    def polygon(cls, points: Iterable[Sequence[float]]) -> BoundaryCurve:
        """Closed polyline through ``points`` (closing vertex added)."""
        vertices = [(float(p[0]), float(p[1])) for p in points]
        if vertices:
            vertices.append(vertices[0])
        return cls(vertices=tuple(vertices))


def _as_points(points: Iterable[Point2D | Sequence[float]]) -> tuple[Point2D, ...]:
    return tuple(p if isinstance(p, Point2D) else Point2D(float(p[0]), float(p[1])) for p in points)


def outer_contour(
    points: Iterable[Point2D | Sequence[float]], material: SectionMaterial
) -> SectionContour:
    return SectionContour(points=_as_points(points), is_hole=False, material=material)


def hole_contour(points: Iterable[Point2D | Sequence[float]]) -> SectionContour:
    return SectionContour(points=_as_points(points), is_hole=True, material=None)
