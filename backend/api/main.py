"""FastAPI application — cross-section assembly API."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from crosssection import (
    BoundaryCurve,
    Evaluation,
    SectionProperties,
    check_boundary,
    section_figure,
    setup_logging,
    translate_mesh,
)
from crosssection.config import cors_origins

from .builder import evaluate_request, to_boundary
from .schemas import (
    BoundaryCheckOutput,
    BoundaryInput,
    DiagnosticOutput,
    ElasticOutput,
    EvaluateRequest,
    EvaluationOutput,
    MeshOutput,
    PlasticOutput,
    RegionGroupOutput,
    RegionOutput,
    SectionPropertiesOutput,
    WarpingOutput,
)
from .sessions import UnitRegistry

setup_logging()
logger = logging.getLogger("crosssection.api")

app = FastAPI(title="Cross Section API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

units = UnitRegistry()


# ── Boundaries ────────────────────────────────────────────────


@app.post("/api/boundaries/validate", response_model=BoundaryCheckOutput)
def validate_boundary(data: BoundaryInput) -> BoundaryCheckOutput:
    """Classify one boundary curve without touching any analysis unit."""
    try:
        curve: BoundaryCurve = to_boundary(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    check = check_boundary(curve)
    return BoundaryCheckOutput(
        ok=check.ok,
        closed=check.closed,
        polyline=check.polyline,
        failure=check.failure.value if check.failure is not None else None,
        points=[(p.x, p.y) for p in check.points],
    )


# ── Analysis units ────────────────────────────────────────────


@app.post("/api/sections/{unit_id}/evaluate", response_model=EvaluationOutput)
def evaluate(unit_id: str, data: EvaluateRequest) -> EvaluationOutput:
    """Assemble the section, solve it when ``run`` is set, derive display data."""
    unit = units.get_or_create(unit_id)
    with unit.lock:
        try:
            ev = evaluate_request(unit.analysis, data)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return _evaluation_output(unit_id, ev, data.deduplicate_edges)


@app.get("/api/sections/{unit_id}", response_model=EvaluationOutput)
def last_evaluation(unit_id: str) -> EvaluationOutput:
    unit = units.get(unit_id)
    if unit is None or unit.analysis.last is None:
        raise HTTPException(status_code=404, detail=f"Unknown analysis unit {unit_id!r}")
    with unit.lock:
        return _evaluation_output(unit_id, unit.analysis.last)


@app.get("/api/sections/{unit_id}/figure")
def figure(unit_id: str) -> dict[str, Any]:
    """Plotly figure JSON of the unit's last evaluation."""
    unit = units.get(unit_id)
    if unit is None or unit.analysis.last is None:
        raise HTTPException(status_code=404, detail=f"Unknown analysis unit {unit_id!r}")
    with unit.lock:
        ev = unit.analysis.last
        fig = section_figure(ev.regions, ev.wireframe, title=f"Section {unit_id}")
    return json.loads(fig.to_json())


@app.delete("/api/sections/{unit_id}")
def delete_unit(unit_id: str) -> dict[str, str]:
    if not units.remove(unit_id):
        raise HTTPException(status_code=404, detail=f"Unknown analysis unit {unit_id!r}")
    logger.info("Removed analysis unit %s", unit_id)
    return {"status": "deleted"}


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Response builders ─────────────────────────────────────────


def _evaluation_output(
    unit_id: str, ev: Evaluation, deduplicate_edges: bool = False
) -> EvaluationOutput:
    wireframe = translate_mesh(ev.mesh, deduplicate=True) if deduplicate_edges else ev.wireframe
    return EvaluationOutput(
        unit_id=unit_id,
        status=ev.status,
        calculated=ev.calculated,
        generation=ev.generation,
        properties=_properties_output(ev.properties),
        mesh=MeshOutput(points=wireframe.points, edges=wireframe.edges),
        regions=[
            RegionGroupOutput(
                material_id=g.material_id,
                color_index=g.color_index,
                color=g.color,
                subtracted=g.subtracted,
                degenerate=g.degenerate,
                regions=[_region_output(r) for r in g.regions],
            )
            for g in ev.regions
        ],
        diagnostics=[
            DiagnosticOutput(level=d.level, message=d.message, source=d.source, code=d.code)
            for d in ev.diagnostics
        ],
    )


def _region_output(region) -> RegionOutput:
    return RegionOutput(
        exterior=[(float(x), float(y)) for x, y in region.exterior.coords],
        interiors=[
            [(float(x), float(y)) for x, y in ring.coords] for ring in region.interiors
        ],
        area=float(region.area),
    )


def _properties_output(p: SectionProperties) -> SectionPropertiesOutput:
    elastic = None
    if p.calculated and p.area != 0:
        elastic = ElasticOutput(
            area=p.area,
            perimeter=p.perimeter,
            centroid=p.centroid,
            nu_eff=p.nu_eff,
            qx=p.qx,
            qy=p.qy,
            ixx_g=p.ixx_g,
            iyy_g=p.iyy_g,
            ixy_g=p.ixy_g,
            ixx_c=p.ixx_c,
            iyy_c=p.iyy_c,
            ixy_c=p.ixy_c,
            zxx_plus=p.zxx_plus,
            zxx_minus=p.zxx_minus,
            zyy_plus=p.zyy_plus,
            zyy_minus=p.zyy_minus,
            rx_c=p.rx_c,
            ry_c=p.ry_c,
            i11_c=p.i11_c,
            i22_c=p.i22_c,
            phi=p.phi,
            z11_plus=p.z11_plus,
            z11_minus=p.z11_minus,
            z22_plus=p.z22_plus,
            z22_minus=p.z22_minus,
            r11_c=p.r11_c,
            r22_c=p.r22_c,
        )

    warping = None
    if p.warping_calculated and p.j != 0:
        warping = WarpingOutput(
            j=p.j,
            Delta_s=p.Delta_s,
            shear_centre_elastic=p.elastic_shear_centre,
            shear_centre_trefftz=p.trefftz_shear_centre,
            gamma=p.gamma,
            A_sx=p.A_sx,
            A_sy=p.A_sy,
            A_sxy=p.A_sxy,
            A_s11=p.A_s11,
            A_s22=p.A_s22,
        )

    plastic = None
    if p.plastic_calculated:
        plastic = PlasticOutput(
            plastic_centroid=p.plastic_centroid,
            sxx=p.sxx,
            syy=p.syy,
            s11=p.s11,
            s22=p.s22,
        )

    return SectionPropertiesOutput(
        elastic=elastic, warping=warping, plastic=plastic, warnings=list(p.warnings)
    )
