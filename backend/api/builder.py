"""Converts JSON input into SectionAnalysis calls."""

from __future__ import annotations

from crosssection import BoundaryCurve, Evaluation, SectionAnalysis, SectionMaterial, SolutionSettings

from .schemas import BoundaryInput, EvaluateRequest, MaterialInput, SettingsInput


# ── Public entry point ────────────────────────────────────────


def evaluate_request(analysis: SectionAnalysis, data: EvaluateRequest) -> Evaluation:
    """Validate the request's boundaries and evaluate them on ``analysis``."""
    outers = [(to_boundary(c.boundary), to_material(c.material)) for c in data.contours]
    holes = [to_boundary(h) for h in data.holes]
    settings = to_settings(data.settings) if data.settings is not None else None
    return analysis.evaluate_boundaries(outers, holes, settings, run=data.run)


# ── Conversions ──────────────────────────────────────────────


def to_boundary(data: BoundaryInput) -> BoundaryCurve:
    vertices = list(data.vertices)
    bulges = list(data.bulges)
    if data.close and vertices and vertices[0] != vertices[-1]:
        vertices.append(vertices[0])
        if bulges:
            bulges.append(0.0)
    return BoundaryCurve(vertices=tuple(vertices), bulges=tuple(bulges))


def to_material(data: MaterialInput) -> SectionMaterial:
    return SectionMaterial(
        name=data.name,
        id=data.id,
        elastic_modulus=data.elastic_modulus,
        poissons_ratio=data.poissons_ratio,
        yield_strength=data.yield_strength,
    )


def to_settings(data: SettingsInput) -> SolutionSettings:
    return SolutionSettings(**data.model_dump())
