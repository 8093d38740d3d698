"""Pydantic request/response models for the API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


# ── Request Models ────────────────────────────────────────────


class BoundaryInput(BaseModel):
    vertices: list[tuple[float, float]]  # closing vertex repeated at the end
    bulges: list[float] = []  # one per segment, 0 = straight
    close: bool = False  # append the first vertex when True


class MaterialInput(BaseModel):
    name: str = "Default"
    id: int = 1
    elastic_modulus: float = 1.0
    poissons_ratio: float = 0.0
    yield_strength: float = 1.0


class ContourInput(BaseModel):
    boundary: BoundaryInput
    material: MaterialInput


class SettingsInput(BaseModel):
    roughness: float = 0.01
    maximum_area: float = 0.0
    minimum_angle: float = 30.0
    maximum_angle: float = 0.0
    conforming_delaunay: bool = True
    plastic_axis_accuracy: float = 1e-5
    plastic_axis_max_iterations: int = 500
    run_warping_analysis: bool = False
    run_plastic_analysis: bool = False


class EvaluateRequest(BaseModel):
    run: bool = False
    contours: list[ContourInput]
    holes: list[BoundaryInput] = []
    settings: SettingsInput | None = None
    deduplicate_edges: bool = False


# ── Response Models ───────────────────────────────────────────


class BoundaryCheckOutput(BaseModel):
    ok: bool
    closed: bool
    polyline: bool
    failure: Literal["NotClosed", "NotPolyline", "SelfIntersecting"] | None = None
    points: list[tuple[float, float]] = []


class DiagnosticOutput(BaseModel):
    level: Literal["error", "warning"]
    message: str
    source: str = ""
    code: str = ""


class ElasticOutput(BaseModel):
    area: float
    perimeter: float
    centroid: tuple[float, float]
    nu_eff: float
    qx: float
    qy: float
    ixx_g: float
    iyy_g: float
    ixy_g: float
    ixx_c: float
    iyy_c: float
    ixy_c: float
    zxx_plus: float
    zxx_minus: float
    zyy_plus: float
    zyy_minus: float
    rx_c: float
    ry_c: float
    i11_c: float
    i22_c: float
    phi: float
    z11_plus: float
    z11_minus: float
    z22_plus: float
    z22_minus: float
    r11_c: float
    r22_c: float


class WarpingOutput(BaseModel):
    j: float
    Delta_s: float
    shear_centre_elastic: tuple[float, float]
    shear_centre_trefftz: tuple[float, float]
    gamma: float
    A_sx: float
    A_sy: float
    A_sxy: float
    A_s11: float
    A_s22: float


class PlasticOutput(BaseModel):
    plastic_centroid: tuple[float, float]
    sxx: float
    syy: float
    s11: float
    s22: float


class SectionPropertiesOutput(BaseModel):
    elastic: ElasticOutput | None = None
    warping: WarpingOutput | None = None
    plastic: PlasticOutput | None = None
    warnings: list[str] = []


class MeshOutput(BaseModel):
    points: list[tuple[float, float, float]]
    edges: list[tuple[tuple[float, float, float], tuple[float, float, float]]]


class RegionOutput(BaseModel):
    exterior: list[tuple[float, float]]
    interiors: list[list[tuple[float, float]]] = []
    area: float


class RegionGroupOutput(BaseModel):
    material_id: int
    color_index: int
    color: str
    subtracted: bool
    degenerate: bool = False
    regions: list[RegionOutput]


class EvaluationOutput(BaseModel):
    unit_id: str
    status: str
    calculated: bool
    generation: int
    properties: SectionPropertiesOutput
    mesh: MeshOutput
    regions: list[RegionGroupOutput]
    diagnostics: list[DiagnosticOutput] = []
