"""End-to-end tests against the sectionproperties backend."""
import pytest

import crosssection.solver as solver_module
from crosssection import (
    CALCULATED,
    SectionAnalysis,
    SectionDefinition,
    SectionMaterial,
    SectionPropertiesSolver,
    SectionPropertiesTriangulator,
    SolutionSettings,
    outer_contour,
    translate_mesh,
)

from conftest import UNIT_SQUARE


@pytest.fixture
def plain_square():
    # unit modulus, so modulus-weighted outputs equal the geometric ones
    return outer_contour(UNIT_SQUARE, SectionMaterial())


@pytest.fixture
def square_definition(plain_square):
    return SectionDefinition(contours=[plain_square], settings=SolutionSettings())


class TestSectionPropertiesSolver:
    def test_unit_square(self, square_definition):
        SectionPropertiesSolver().solve(square_definition)
        out = square_definition.output
        assert out.calculated
        assert out.area == pytest.approx(1.0)
        assert out.centroid == pytest.approx((0.5, 0.5))
        assert out.ixx_c == pytest.approx(1 / 12, rel=1e-6)
        assert out.perimeter == pytest.approx(4.0)
        assert not out.warping_calculated

    def test_square_with_hole(self, unit_square, centred_hole):
        definition = SectionDefinition(
            contours=[unit_square, centred_hole], settings=SolutionSettings()
        )
        SectionPropertiesSolver().solve(definition)
        assert definition.output.area == pytest.approx(0.75)
        assert definition.output.centroid == pytest.approx((0.5, 0.5))

    def test_warping_analysis(self, plain_square):
        definition = SectionDefinition(
            contours=[plain_square],
            settings=SolutionSettings(maximum_area=0.005, run_warping_analysis=True),
        )
        SectionPropertiesSolver().solve(definition)
        out = definition.output
        assert out.warping_calculated
        # torsion constant of a square, 0.1406 * a^4
        assert out.j == pytest.approx(0.1406, rel=2e-2)
        assert out.elastic_shear_centre == pytest.approx((0.5, 0.5), abs=1e-3)

    def test_plastic_analysis(self, unit_square):
        definition = SectionDefinition(
            contours=[unit_square],
            settings=SolutionSettings(run_plastic_analysis=True),
        )
        SectionPropertiesSolver().solve(definition)
        out = definition.output
        assert out.plastic_calculated
        assert out.plastic_centroid == pytest.approx((0.5, 0.5), abs=1e-3)


class TestSectionPropertiesTriangulator:
    def test_mesh_is_linear_and_indexed(self, square_definition):
        mesh = SectionPropertiesTriangulator().triangulate(square_definition)
        assert len(mesh.triangles) > 0
        n = len(mesh.vertices)
        assert all(0 <= i < n for tri in mesh.triangles for i in tri)
        assert {i for tri in mesh.triangles for i in tri} == set(range(n))

    def test_wireframe_counts(self, square_definition):
        mesh = SectionPropertiesTriangulator().triangulate(square_definition)
        wire = translate_mesh(mesh)
        assert len(wire.edges) == 3 * len(mesh.triangles)
        assert len(wire.points) == len(mesh.vertices)


class TestMeshSharing:
    def test_solve_and_triangulate_mesh_once(self, square_definition, monkeypatch):
        built = []
        original = solver_module.build_geometry

        def counting_build(definition):
            built.append(definition)
            return original(definition)

        monkeypatch.setattr(solver_module, "build_geometry", counting_build)
        SectionPropertiesSolver().solve(square_definition)
        mesh = SectionPropertiesTriangulator().triangulate(square_definition)

        assert len(built) == 1
        assert square_definition.geometry is not None
        assert len(mesh.triangles) > 0

    def test_cached_geometry_is_not_part_of_equality(self, square_definition, plain_square):
        SectionPropertiesTriangulator().triangulate(square_definition)
        fresh = SectionDefinition(contours=[plain_square], settings=SolutionSettings())
        assert square_definition == fresh


class TestEndToEnd:
    def test_unit_square(self, unit_square):
        ev = SectionAnalysis().evaluate([unit_square], [], SolutionSettings(), run=True)
        assert ev.status == CALCULATED
        assert ev.properties.area == pytest.approx(1.0)
        assert ev.properties.centroid == pytest.approx((0.5, 0.5))

    def test_square_with_centred_hole(self, unit_square, centred_hole):
        ev = SectionAnalysis().evaluate([unit_square], [centred_hole], SolutionSettings(), run=True)
        assert ev.properties.area == pytest.approx(0.75)
        assert sum(r.area for r in ev.regions[0].regions) == pytest.approx(0.75, abs=1e-3)

    def test_two_materials(self, unit_square, timber):
        right = outer_contour([(1, 0), (2, 0), (2, 1), (1, 1)], timber)
        ev = SectionAnalysis().evaluate([unit_square, right], [], SolutionSettings(), run=True)
        assert ev.status == CALCULATED
        assert ev.properties.area == pytest.approx(2.0)
        assert [g.material_id for g in ev.regions] == [1, 2]
