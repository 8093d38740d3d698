"""Per-material display regions with holes subtracted.

Outer contours are grouped by material id (first-seen order). Each group
becomes one set of planar regions from which the union of all holes is
removed. Holes carry no material and apply to every group. If the boolean
difference produces nothing the group is shown without its holes instead of
disappearing.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from shapely.errors import GEOSException
from shapely.geometry import LinearRing, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from .config import BOOLEAN_TOLERANCE, CURVE_TOLERANCE
from .palette import PALETTE, palette_index
from .types import SectionContour

logger = logging.getLogger(__name__)


class RegionAlgebra(Protocol):
    """Planar curve and region operations used to build display regions."""

    def closed_curve(self, points: Sequence[tuple[float, float]], tolerance: float) -> Any: ...

    def is_clockwise(self, curve: Any) -> bool: ...

    def reverse(self, curve: Any) -> Any: ...

    def planar_regions(self, curves: Sequence[Any], tolerance: float) -> list[Any]: ...

    def difference(self, regions: Sequence[Any], cutters: Sequence[Any], tolerance: float) -> list[Any]:
        """Regions minus cutters; an empty list means no usable result."""


def _polygons(geom: BaseGeometry) -> list[Polygon]:
    if geom.is_empty:
        return []
    if isinstance(geom, Polygon):
        parts = [geom]
    elif isinstance(geom, MultiPolygon):
        parts = list(geom.geoms)
    else:
        parts = [g for g in getattr(geom, "geoms", []) if isinstance(g, Polygon)]
    return [p for p in parts if p.area > 0.0]


class ShapelyRegionAlgebra:
    def closed_curve(self, points: Sequence[tuple[float, float]], tolerance: float) -> LinearRing:
        coords = list(points)
        if len(coords) > 1:
            first, last = coords[0], coords[-1]
            if abs(first[0] - last[0]) <= tolerance and abs(first[1] - last[1]) <= tolerance:
                coords.pop()
        return LinearRing(coords)

    def is_clockwise(self, curve: LinearRing) -> bool:
        return not curve.is_ccw

    def reverse(self, curve: LinearRing) -> LinearRing:
        return LinearRing(list(curve.coords)[::-1])

    def planar_regions(self, curves: Sequence[LinearRing], tolerance: float) -> list[Polygon]:
        """Union of the curve interiors. The union is exact, so no area cutoff applies."""
        polygons = [Polygon(c) for c in curves]
        polygons = [p if p.is_valid else p.buffer(0) for p in polygons]
        return _polygons(unary_union(polygons))

    def difference(
        self, regions: Sequence[Polygon], cutters: Sequence[Polygon], tolerance: float
    ) -> list[Polygon]:
        try:
            source = unary_union(list(regions))
            result = source.difference(unary_union(list(cutters)))
        except GEOSException as exc:
            logger.warning("Boolean difference failed: %s", exc)
            return []
        # slivers are judged relative to the region they were cut from
        sliver = tolerance * tolerance * source.area
        return [p for p in _polygons(result) if p.area > sliver]


@dataclass
class RegionGroup:
    """Shaded display region set for one material."""

    material_id: int
    regions: list[Any] = field(default_factory=list)
    color_index: int = 0
    color: str = ""
    subtracted: bool = False
    degenerate: bool = False


def _normalized_curve(algebra: RegionAlgebra, contour: SectionContour) -> Any:
    coords = contour.coords()
    coords.append(coords[0])
    curve = algebra.closed_curve(coords, CURVE_TOLERANCE)
    if algebra.is_clockwise(curve):
        curve = algebra.reverse(curve)
    return curve


def group_by_material(contours: Sequence[SectionContour]) -> dict[int, list[SectionContour]]:
    groups: dict[int, list[SectionContour]] = {}
    for contour in contours:
        if contour.material is None:
            continue
        groups.setdefault(contour.material.id, []).append(contour)
    return groups


def derive_regions(
    contours: Sequence[SectionContour],
    holes: Sequence[SectionContour] = (),
    algebra: RegionAlgebra | None = None,
    palette: Sequence[str] = PALETTE,
) -> list[RegionGroup]:
    """Build one hole-subtracted region group per material id."""
    algebra = algebra or ShapelyRegionAlgebra()

    hole_curves = [_normalized_curve(algebra, h) for h in holes]
    hole_regions = algebra.planar_regions(hole_curves, CURVE_TOLERANCE) if hole_curves else []

    out: list[RegionGroup] = []
    for material_id, members in group_by_material(contours).items():
        curves = [_normalized_curve(algebra, c) for c in members]
        regions = algebra.planar_regions(curves, BOOLEAN_TOLERANCE)

        subtracted = degenerate = False
        if hole_regions:
            result = algebra.difference(regions, hole_regions, BOOLEAN_TOLERANCE)
            if result:
                regions = result
                subtracted = True
            else:
                degenerate = True
                logger.warning(
                    "SubtractionDegenerate: material %d shown without holes", material_id
                )

        index = palette_index(material_id, len(palette))
        out.append(
            RegionGroup(
                material_id=material_id,
                regions=list(regions),
                color_index=index,
                color=palette[index],
                subtracted=subtracted,
                degenerate=degenerate,
            )
        )
    return out
