"""Section property solver and triangulator backed by sectionproperties."""

from __future__ import annotations

import logging
import time
from typing import Protocol

import numpy as np
from sectionproperties.analysis.section import Section
from sectionproperties.pre.geometry import CompoundGeometry, Geometry
from sectionproperties.pre.pre import Material
from shapely.geometry import Polygon

from .definition import SectionDefinition, SectionProperties
from .errors import AssemblyError, AssemblyFailure
from .mesh import Mesh
from .palette import material_color
from .types import Point2D, SectionMaterial, SolutionSettings

logger = logging.getLogger(__name__)

_WARPING_FIELDS = ("j", "Delta_s", "x_se", "y_se", "x_st", "y_st", "gamma",
                   "A_sx", "A_sy", "A_sxy", "A_s11", "A_s22")
_PLASTIC_FIELDS = ("x_pc", "y_pc", "sxx", "syy", "s11", "s22")


class Solver(Protocol):
    def solve(self, definition: SectionDefinition) -> None:
        """Populate ``definition.output`` in place."""


class Triangulator(Protocol):
    def triangulate(self, definition: SectionDefinition) -> Mesh:
        ...


# ── Geometry assembly ─────────────────────────────────────────


def _to_material(material: SectionMaterial) -> Material:
    return Material(
        name=material.name,
        elastic_modulus=material.elastic_modulus,
        poissons_ratio=material.poissons_ratio,
        yield_strength=material.yield_strength,
        density=1.0,
        color=material_color(material.id),
    )


def build_geometry(definition: SectionDefinition) -> Geometry | CompoundGeometry:
    """Outer contours as one (compound) geometry with every hole subtracted."""
    outers = definition.outer_contours
    if not outers:
        raise AssemblyError(AssemblyFailure.EMPTY_CONTOUR_SET, "Contour is not valid!")

    materials: dict[int, Material] = {}
    parts: list[Geometry] = []
    for contour in outers:
        mat = materials.setdefault(contour.material.id, _to_material(contour.material))
        parts.append(Geometry(geom=Polygon(contour.coords()), material=mat))

    geometry: Geometry | CompoundGeometry = (
        parts[0] if len(parts) == 1 else CompoundGeometry(parts)
    )
    for hole in definition.holes:
        geometry = geometry - Geometry(geom=Polygon(hole.coords()))

    return geometry


def mesh_geometry(definition: SectionDefinition) -> Geometry | CompoundGeometry:
    """Meshed geometry of ``definition``, built once and kept on the definition."""
    if definition.geometry is not None:
        return definition.geometry

    settings = definition.settings or SolutionSettings()
    total_area = sum(Polygon(c.coords()).area for c in definition.outer_contours)
    size = settings.mesh_size(total_area)
    if size <= 0:
        raise AssemblyError(
            AssemblyFailure.SOLVER_FAILED,
            f"Mesh size must be positive, got {size!r}",
        )
    if settings.maximum_angle > 0:
        logger.warning(
            "maximum_angle=%s is not supported by the mesher and is ignored",
            settings.maximum_angle,
        )

    geometry = build_geometry(definition)
    count = len(geometry.geoms) if isinstance(geometry, CompoundGeometry) else 1
    geometry.create_mesh(mesh_sizes=[size] * count, min_angle=settings.minimum_angle)
    definition.geometry = geometry
    return geometry


def _copy_props(section: Section, output: SectionProperties, names) -> None:
    props = section.section_props
    for name in names:
        value = getattr(props, name, None)
        setattr(output, name, float(value) if value is not None else 0.0)


# ── Backends ──────────────────────────────────────────────────


class SectionPropertiesSolver:
    """Runs geometric, and optionally warping and plastic, analyses.

    A failing warping or plastic stage is recorded in ``output.warnings``;
    a failing mesh or geometric stage raises AssemblyError.
    """

    def solve(self, definition: SectionDefinition) -> None:
        settings = definition.settings or SolutionSettings()
        output = definition.output

        t0 = time.perf_counter()
        try:
            geometry = mesh_geometry(definition)
            section = Section(geometry=geometry)
            section.calculate_geometric_properties()
        except AssemblyError:
            raise
        except Exception as exc:
            raise AssemblyError(AssemblyFailure.SOLVER_FAILED, str(exc)) from exc

        geometric = [n for n in SectionProperties.scalar_names()
                     if n not in _WARPING_FIELDS and n not in _PLASTIC_FIELDS]
        _copy_props(section, output, geometric)
        output.calculated = True
        t1 = time.perf_counter()

        if settings.run_warping_analysis:
            try:
                section.calculate_warping_properties()
                _copy_props(section, output, _WARPING_FIELDS)
                output.warping_calculated = True
            except Exception as exc:
                logger.warning("Warping analysis failed: %s", exc)
                output.warnings.append("Warping properties could not be computed for this geometry.")

        if settings.run_plastic_analysis:
            try:
                section.calculate_plastic_properties()
                _copy_props(section, output, _PLASTIC_FIELDS)
                output.plastic_calculated = True
            except Exception as exc:
                logger.warning("Plastic analysis failed: %s", exc)
                output.warnings.append("Plastic properties could not be computed for this geometry.")

        t2 = time.perf_counter()
        logger.info(
            "Solved %d contours: area=%.6g, geometric=%.3fs, further=%.3fs",
            len(definition.contours), output.area, t1 - t0, t2 - t1,
        )


class SectionPropertiesTriangulator:
    """Meshes the section and keeps only the corner nodes of each triangle."""

    def triangulate(self, definition: SectionDefinition) -> Mesh:
        try:
            geometry = mesh_geometry(definition)
        except AssemblyError:
            raise
        except Exception as exc:
            raise AssemblyError(AssemblyFailure.SOLVER_FAILED, str(exc)) from exc

        vertices = np.asarray(geometry.mesh["vertices"], dtype=float)
        corners = np.asarray(geometry.mesh["triangles"], dtype=int)[:, :3]

        used = np.unique(corners)
        remap = np.full(len(vertices), -1, dtype=int)
        remap[used] = np.arange(len(used))
        triangles = remap[corners]

        mesh = Mesh(
            vertices=[Point2D(float(x), float(y)) for x, y in vertices[used]],
            triangles=[(int(a), int(b), int(c)) for a, b, c in triangles],
        )
        logger.debug("Triangulated: %d vertices, %d triangles",
                     len(mesh.vertices), len(mesh.triangles))
        return mesh
