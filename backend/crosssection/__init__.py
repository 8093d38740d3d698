"""crosssection — multi-material cross-section assembly and display."""

from .analysis import CALCULATED, NOT_CALCULATED, Diagnostic, Evaluation, SectionAnalysis
from .definition import SectionDefinition, SectionProperties
from .errors import AssemblyError, AssemblyFailure, GeometryError, GeometryFailure, SectionError
from .logging_config import setup_logging
from .mesh import Mesh, MeshWireframe, translate_mesh
from .palette import PALETTE, material_color, palette_index
from .plotting import section_figure
from .regions import RegionAlgebra, RegionGroup, ShapelyRegionAlgebra, derive_regions
from .solver import SectionPropertiesSolver, SectionPropertiesTriangulator, Solver, Triangulator
from .types import (
    BoundaryCurve,
    Point2D,
    SectionContour,
    SectionMaterial,
    SolutionSettings,
    hole_contour,
    outer_contour,
)
from .validation import (
    BoundaryCheck,
    check_boundary,
    contour_from_boundary,
    hole_from_boundary,
    validate_boundary,
)

__all__ = [
    "AssemblyError",
    "AssemblyFailure",
    "BoundaryCheck",
    "BoundaryCurve",
    "CALCULATED",
    "Diagnostic",
    "Evaluation",
    "GeometryError",
    "GeometryFailure",
    "Mesh",
    "MeshWireframe",
    "NOT_CALCULATED",
    "PALETTE",
    "Point2D",
    "RegionAlgebra",
    "RegionGroup",
    "SectionAnalysis",
    "SectionContour",
    "SectionDefinition",
    "SectionError",
    "SectionMaterial",
    "SectionProperties",
    "SectionPropertiesSolver",
    "SectionPropertiesTriangulator",
    "ShapelyRegionAlgebra",
    "SolutionSettings",
    "Solver",
    "Triangulator",
    "check_boundary",
    "contour_from_boundary",
    "derive_regions",
    "hole_contour",
    "hole_from_boundary",
    "material_color",
    "outer_contour",
    "palette_index",
    "section_figure",
    "setup_logging",
    "translate_mesh",
    "validate_boundary",
]
