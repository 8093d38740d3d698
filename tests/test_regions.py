"""Tests for per-material region derivation."""
import pytest

from crosssection import (
    PALETTE,
    ShapelyRegionAlgebra,
    SectionMaterial,
    derive_regions,
    hole_contour,
    material_color,
    outer_contour,
    palette_index,
)

from conftest import CENTRED_HOLE, UNIT_SQUARE, DegenerateAlgebra


LEFT = [(0, 0), (1, 0), (1, 1), (0, 1)]
RIGHT = [(1, 0), (2, 0), (2, 1), (1, 1)]
SPANNING_HOLE = [(0.5, 0.25), (1.5, 0.25), (1.5, 0.75), (0.5, 0.75)]


def _area(group):
    return sum(r.area for r in group.regions)


class TestDeriveRegions:
    def test_same_material_is_one_group_minus_hole(self, steel):
        groups = derive_regions(
            [outer_contour(LEFT, steel), outer_contour(RIGHT, steel)],
            [hole_contour(SPANNING_HOLE)],
        )
        assert len(groups) == 1
        assert groups[0].subtracted
        assert _area(groups[0]) == pytest.approx(1.0 + 1.0 - 0.5, abs=1e-3)

    def test_square_with_centred_hole(self, unit_square, centred_hole):
        (group,) = derive_regions([unit_square], [centred_hole])
        assert _area(group) == pytest.approx(0.75, abs=1e-3)
        assert len(group.regions[0].interiors) == 1

    def test_groups_keep_first_seen_order(self):
        a = SectionMaterial("A", id=3)
        b = SectionMaterial("B", id=1)
        groups = derive_regions([
            outer_contour(LEFT, a),
            outer_contour(RIGHT, b),
            outer_contour([(0, 1), (1, 1), (1, 2), (0, 2)], a),
        ])
        assert [g.material_id for g in groups] == [3, 1]
        assert _area(groups[0]) == pytest.approx(2.0)

    def test_holes_apply_to_every_group(self, steel, timber):
        groups = derive_regions(
            [outer_contour(LEFT, steel), outer_contour(RIGHT, timber)],
            [hole_contour(SPANNING_HOLE)],
        )
        assert [_area(g) for g in groups] == pytest.approx([0.75, 0.75], abs=1e-3)

    def test_clockwise_contours_are_normalised(self, steel):
        clockwise = list(reversed(UNIT_SQUARE))
        (group,) = derive_regions([outer_contour(clockwise, steel)], [hole_contour(list(reversed(CENTRED_HOLE)))])
        assert _area(group) == pytest.approx(0.75, abs=1e-3)

    def test_degenerate_subtraction_falls_back_to_outer_regions(self, unit_square, centred_hole):
        (group,) = derive_regions([unit_square], [centred_hole], algebra=DegenerateAlgebra())
        assert not group.subtracted
        assert group.degenerate
        assert _area(group) == pytest.approx(1.0)

    def test_no_holes_skips_subtraction(self, unit_square):
        (group,) = derive_regions([unit_square])
        assert not group.subtracted
        assert not group.degenerate
        assert _area(group) == pytest.approx(1.0)

    def test_hole_covering_everything_falls_back(self, unit_square):
        cover = hole_contour([(-1, -1), (2, -1), (2, 2), (-1, 2)])
        (group,) = derive_regions([unit_square], [cover])
        assert not group.subtracted
        assert _area(group) == pytest.approx(1.0)



class TestSmallScaleSections:
    """Sections drawn in metres keep every region and hole."""

    def test_small_hole_in_metre_plate_is_subtracted(self, steel):
        plate = outer_contour([(0, 0), (0.1, 0), (0.1, 0.1), (0, 0.1)], steel)
        bolt = hole_contour([(0.046, 0.046), (0.054, 0.046), (0.054, 0.054), (0.046, 0.054)])
        (group,) = derive_regions([plate], [bolt])
        assert group.subtracted and not group.degenerate
        assert len(group.regions) == 1
        assert len(group.regions[0].interiors) == 1
        assert _area(group) == pytest.approx(0.01 - 0.008 ** 2, rel=1e-9)

    def test_millimetre_plate_keeps_its_region(self, steel):
        plate = outer_contour([(0, 0), (0.001, 0), (0.001, 0.0008), (0, 0.0008)], steel)
        (group,) = derive_regions([plate])
        assert len(group.regions) == 1
        assert _area(group) == pytest.approx(8e-7, rel=1e-9)

    def test_millimetre_plate_with_hole(self, steel):
        plate = outer_contour([(0, 0), (0.001, 0), (0.001, 0.001), (0, 0.001)], steel)
        hole = hole_contour([(0.0004, 0.0004), (0.0006, 0.0004), (0.0006, 0.0006), (0.0004, 0.0006)])
        (group,) = derive_regions([plate], [hole])
        assert group.subtracted
        assert _area(group) == pytest.approx(1e-6 - 4e-8, rel=1e-9)


class TestAlgebra:
    def test_orientation_and_reverse(self):
        algebra = ShapelyRegionAlgebra()
        ring = algebra.closed_curve(list(reversed(UNIT_SQUARE)) + [UNIT_SQUARE[-1]], 1e-2)
        assert algebra.is_clockwise(ring)
        assert not algebra.is_clockwise(algebra.reverse(ring))


class TestPalette:
    def test_palette_is_reversed_named_colours(self):
        assert len(PALETTE) == 141
        assert PALETTE[0] == "yellowgreen"
        assert PALETTE[-1] == "transparent"

    def test_material_id_indexes_palette(self, steel):
        (group,) = derive_regions([outer_contour(UNIT_SQUARE, steel)])
        assert group.color_index == 1
        assert group.color == PALETTE[1] == "yellow"

    def test_overflowing_id_clamps_to_transparent(self):
        big = SectionMaterial("Big", id=500)
        (group,) = derive_regions([outer_contour(UNIT_SQUARE, big)])
        assert group.color_index == len(PALETTE) - 1
        assert group.color == "transparent"
        assert material_color(140) == "transparent"
        assert material_color(139) != "transparent"
        assert palette_index(len(PALETTE)) == len(PALETTE) - 1

    def test_negative_id_is_clamped(self):
        assert palette_index(-4) == 0
        assert material_color(-4) == PALETTE[0]

    def test_custom_palette(self, unit_square):
        (group,) = derive_regions([unit_square], palette=("red", "blue"))
        assert group.color == "blue"
