"""Boundary curve validation.

A curve becomes a contour only if it is closed, made of straight segments
only, and does not touch itself within ``SELF_INTERSECTION_TOLERANCE``.
The checks run in that order and stop at the first failure.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from shapely import STRtree
from shapely.geometry import LinearRing, LineString

from .config import CLOSURE_TOLERANCE, SELF_INTERSECTION_TOLERANCE
from .errors import GeometryError, GeometryFailure
from .types import BoundaryCurve, Point2D, SectionContour, SectionMaterial, hole_contour, outer_contour

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundaryCheck:
    """Outcome of validating one boundary curve."""

    closed: bool
    polyline: bool
    failure: GeometryFailure | None = None
    points: list[Point2D] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failure is None


def _same(a: tuple[float, float], b: tuple[float, float]) -> bool:
    return math.dist(a, b) <= CLOSURE_TOLERANCE


def _is_closed(vertices: tuple[tuple[float, float], ...]) -> bool:
    # two segments already close a curve when they are arcs
    return len(vertices) >= 3 and _same(vertices[0], vertices[-1])


def _ring_vertices(vertices: tuple[tuple[float, float], ...]) -> list[tuple[float, float]]:
    """Open vertex list with the closing vertex and repeated vertices removed."""
    ring: list[tuple[float, float]] = []
    for v in vertices[:-1]:
        if not ring or not _same(ring[-1], v):
            ring.append(v)
    if len(ring) > 1 and _same(ring[0], ring[-1]):
        ring.pop()
    return ring


def _self_intersects(ring: list[tuple[float, float]], tolerance: float) -> bool:
    """True when the ring touches itself or folds back onto itself.

    A closed polyline with fewer than three distinct vertices can only
    retrace its own segments and counts as self-intersecting.
    """
    n = len(ring)
    if n < 3 or not LinearRing(ring).is_simple:
        return True

    segments = [LineString([ring[i], ring[(i + 1) % n]]) for i in range(n)]
    tree = STRtree(segments)
    left, right = tree.query(segments, predicate="dwithin", distance=tolerance)
    for i, j in zip(left.tolist(), right.tolist()):
        if i >= j:
            continue
        # neighbours always share a vertex
        if j - i == 1 or (i == 0 and j == n - 1):
            continue
        return True
    return False


def check_boundary(
    curve: BoundaryCurve, tolerance: float = SELF_INTERSECTION_TOLERANCE
) -> BoundaryCheck:
    """Classify ``curve`` and return its ordered vertices when it is valid."""
    closed = _is_closed(curve.vertices)
    polyline = all(b == 0.0 for b in curve.bulges)

    if not closed:
        return BoundaryCheck(closed, polyline, GeometryFailure.NOT_CLOSED)
    if not polyline:
        return BoundaryCheck(closed, polyline, GeometryFailure.NOT_POLYLINE)

    ring = _ring_vertices(curve.vertices)
    if _self_intersects(ring, tolerance):
        return BoundaryCheck(closed, polyline, GeometryFailure.SELF_INTERSECTING)

    points = [Point2D(x, y) for x, y in ring]
    return BoundaryCheck(closed, polyline, None, points)


def validate_boundary(curve: BoundaryCurve) -> list[Point2D]:
    """Return the ordered contour points of ``curve`` or raise GeometryError."""
    check = check_boundary(curve)
    if check.failure is not None:
        logger.debug("Boundary rejected: %s", check.failure.value)
        raise GeometryError(check.failure)
    return check.points


def contour_from_boundary(curve: BoundaryCurve, material: SectionMaterial) -> SectionContour:
    return outer_contour(validate_boundary(curve), material)


def hole_from_boundary(curve: BoundaryCurve) -> SectionContour:
    return hole_contour(validate_boundary(curve))
