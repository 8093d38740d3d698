"""SectionAnalysis: the stateful entry point for one analysis unit."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .definition import SectionDefinition, SectionProperties
from .errors import AssemblyError, AssemblyFailure, GeometryError, SectionError
from .mesh import Mesh, MeshWireframe, translate_mesh
from .palette import PALETTE
from .regions import RegionAlgebra, RegionGroup, ShapelyRegionAlgebra, derive_regions
from .solver import (
    SectionPropertiesSolver,
    SectionPropertiesTriangulator,
    Solver,
    Triangulator,
)
from .types import BoundaryCurve, SectionContour, SectionMaterial, SolutionSettings
from .validation import contour_from_boundary, hole_from_boundary

logger = logging.getLogger(__name__)

CALCULATED = "Calculated!"
NOT_CALCULATED = "Not Calculated"


@dataclass(frozen=True)
class Diagnostic:
    level: str  # "error" | "warning"
    message: str
    source: str = ""
    code: str = ""


@dataclass
class Evaluation:
    """Everything one evaluation hands back to the caller."""

    status: str
    definition: SectionDefinition
    mesh: Mesh | None
    wireframe: MeshWireframe
    regions: list[RegionGroup] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def calculated(self) -> bool:
        return self.status == CALCULATED

    @property
    def properties(self) -> SectionProperties:
        return self.definition.output

    @property
    def generation(self) -> int:
        return self.definition.generation

    @property
    def ok(self) -> bool:
        return not any(d.level == "error" for d in self.diagnostics)


class SectionAnalysis:
    """Owns one SectionDefinition across repeated evaluations.

    Usage:
        analysis = SectionAnalysis()
        steel = SectionMaterial("Steel", id=1, elastic_modulus=200e3)
        square = outer_contour([(0, 0), (1, 0), (1, 1), (0, 1)], steel)
        ev = analysis.evaluate([square], [], SolutionSettings(), run=True)
        ev.status          # "Calculated!"
        ev.properties.area # 1.0

    With ``run=False`` the last solved definition and mesh are handed back
    untouched. With ``run=True`` a brand new definition is assembled and
    committed only once both the solver and the triangulator succeed.
    """

    def __init__(
        self,
        solver: Solver | None = None,
        triangulator: Triangulator | None = None,
        algebra: RegionAlgebra | None = None,
        palette: Sequence[str] = PALETTE,
    ) -> None:
        self._solver = solver or SectionPropertiesSolver()
        self._triangulator = triangulator or SectionPropertiesTriangulator()
        self._algebra = algebra or ShapelyRegionAlgebra()
        self._palette = palette

        self.definition = SectionDefinition()
        self.mesh: Mesh | None = None
        self.wireframe = MeshWireframe()

        self._generation = 0
        self._committed: tuple | None = None

        self.last: Evaluation | None = None

    # ── Evaluation ───────────────────────────────────────────────────

    def evaluate(
        self,
        contours: Sequence[SectionContour],
        holes: Sequence[SectionContour] = (),
        settings: SolutionSettings | None = None,
        run: bool = False,
    ) -> Evaluation:
        """Assemble, optionally solve, and derive display data."""
        contours = list(contours)
        holes = list(holes)
        diagnostics: list[Diagnostic] = []

        try:
            self._check_inputs(contours, holes, settings, run)
            if run:
                self._run(contours, holes, settings)
        except SectionError as exc:
            logger.error("Evaluation aborted: %s", exc)
            diagnostics.append(_diagnostic(exc))
            regions: list[RegionGroup] = []
        else:
            regions = derive_regions(contours, holes, self._algebra, self._palette)
            for group in regions:
                if group.degenerate:
                    diagnostics.append(
                        Diagnostic(
                            level="warning",
                            message="Hole subtraction failed; region shown without holes",
                            source=f"material[{group.material_id}]",
                            code="SubtractionDegenerate",
                        )
                    )
        diagnostics.extend(
            Diagnostic(level="warning", message=w, code="SolverWarning")
            for w in self.definition.output.warnings
        )

        self.last = Evaluation(
            status=self.status,
            definition=self.definition,
            mesh=self.mesh,
            wireframe=self.wireframe,
            regions=regions,
            diagnostics=diagnostics,
        )
        return self.last

    def evaluate_boundaries(
        self,
        outers: Sequence[tuple[BoundaryCurve, SectionMaterial]],
        holes: Sequence[BoundaryCurve] = (),
        settings: SolutionSettings | None = None,
        run: bool = False,
    ) -> Evaluation:
        """Validate raw boundary curves, then evaluate.

        Every failing curve yields one diagnostic naming its input slot and
        the evaluation stops before touching the current definition.
        """
        contours: list[SectionContour] = []
        hole_contours: list[SectionContour] = []
        diagnostics: list[Diagnostic] = []

        for i, (curve, material) in enumerate(outers):
            try:
                contours.append(contour_from_boundary(curve, material))
            except GeometryError as exc:
                diagnostics.append(_diagnostic(exc, source=f"contours[{i}]"))
        for i, curve in enumerate(holes):
            try:
                hole_contours.append(hole_from_boundary(curve))
            except GeometryError as exc:
                diagnostics.append(_diagnostic(exc, source=f"holes[{i}]"))

        if diagnostics:
            logger.error("%d boundary curve(s) rejected", len(diagnostics))
            self.last = Evaluation(
                status=self.status,
                definition=self.definition,
                mesh=self.mesh,
                wireframe=self.wireframe,
                diagnostics=diagnostics,
            )
            return self.last

        return self.evaluate(contours, hole_contours, settings, run)

    @property
    def status(self) -> str:
        output = self.definition.output
        return CALCULATED if output.calculated and output.area != 0 else NOT_CALCULATED

    @property
    def generation(self) -> int:
        return self._generation

    # ── Internals ────────────────────────────────────────────────────

    def _check_inputs(self, contours, holes, settings, run: bool) -> None:
        if not contours:
            raise AssemblyError(AssemblyFailure.EMPTY_CONTOUR_SET, "Contour is not valid!")
        if any(c.is_hole for c in contours):
            raise AssemblyError(
                AssemblyFailure.INVALID_CONTOUR_ROLE, "Hole supplied as an outer contour"
            )
        if any(not h.is_hole for h in holes):
            raise AssemblyError(
                AssemblyFailure.INVALID_CONTOUR_ROLE, "Outer contour supplied as a hole"
            )
        if run and settings is None:
            raise AssemblyError(AssemblyFailure.MISSING_SETTINGS, "Settings are not defined!")

    def _run(self, contours, holes, settings: SolutionSettings) -> None:
        snapshot = (settings, tuple(contours), tuple(holes))
        generation = self._generation
        if snapshot != self._committed:
            generation += 1

        if not self.definition.is_default():
            logger.debug("Discarding definition of generation %d", self.definition.generation)
        definition = SectionDefinition(generation=generation)
        definition.settings = settings
        definition.contours.clear()
        definition.contours.extend(contours)
        definition.contours.extend(holes)

        self._solver.solve(definition)
        mesh = self._triangulator.triangulate(definition)

        self.definition = definition
        self.mesh = mesh
        self.wireframe = translate_mesh(mesh)
        self._generation = generation
        self._committed = snapshot
        logger.info(
            "Committed generation %d: %d contours, %d holes",
            generation, len(contours), len(holes),
        )


def _diagnostic(exc: SectionError, source: str = "") -> Diagnostic:
    failure = getattr(exc, "failure", None)
    return Diagnostic(
        level="error",
        message=str(exc),
        source=source,
        code=failure.value if failure is not None else type(exc).__name__,
    )
