"""
Shared fixtures for the cross-section pipeline tests.
"""
import pytest
from shapely.geometry import Polygon

from crosssection import (
    Mesh,
    Point2D,
    SectionDefinition,
    SectionMaterial,
    ShapelyRegionAlgebra,
    hole_contour,
    outer_contour,
)


UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
CENTRED_HOLE = [(0.25, 0.25), (0.75, 0.25), (0.75, 0.75), (0.25, 0.75)]


class StubSolver:
    """Writes the shapely area and centroid of the assembled section."""

    def __init__(self, area_override=None):
        self.calls = 0
        self.area_override = area_override

    def solve(self, definition: SectionDefinition) -> None:
        self.calls += 1
        shape = Polygon()
        for c in definition.outer_contours:
            shape = shape.union(Polygon(c.coords()))
        for h in definition.holes:
            shape = shape.difference(Polygon(h.coords()))
        out = definition.output
        out.area = shape.area if self.area_override is None else self.area_override
        out.cx, out.cy = shape.centroid.x, shape.centroid.y
        out.calculated = True


class DegenerateAlgebra(ShapelyRegionAlgebra):
    """Boolean difference that never produces a result."""

    def difference(self, regions, cutters, tolerance):
        return []


class StubTriangulator:
    """Returns the unit square split along its diagonal."""

    def __init__(self):
        self.calls = 0

    def triangulate(self, definition: SectionDefinition) -> Mesh:
        self.calls += 1
        return Mesh(
            vertices=[Point2D(x, y) for x, y in UNIT_SQUARE],
            triangles=[(0, 1, 2), (0, 2, 3)],
        )


@pytest.fixture
def steel():
    return SectionMaterial("Steel", id=1, elastic_modulus=200e3, poissons_ratio=0.3, yield_strength=355)


@pytest.fixture
def timber():
    return SectionMaterial("Timber", id=2, elastic_modulus=11e3, poissons_ratio=0.35, yield_strength=24)


@pytest.fixture
def unit_square(steel):
    return outer_contour(UNIT_SQUARE, steel)


@pytest.fixture
def centred_hole():
    return hole_contour(CENTRED_HOLE)


@pytest.fixture
def stub_solver():
    return StubSolver()


@pytest.fixture
def stub_triangulator():
    return StubTriangulator()
