"""Plotly rendering of material regions and the mesh wireframe."""

from __future__ import annotations

from collections.abc import Sequence

import plotly.graph_objects as go

from .config import REGION_OPACITY
from .mesh import MeshWireframe
from .regions import RegionGroup


def _ring_xy(coords) -> tuple[list[float], list[float]]:
    xs = [float(c[0]) for c in coords]
    ys = [float(c[1]) for c in coords]
    return xs, ys


def region_traces(groups: Sequence[RegionGroup]) -> list[go.Scatter]:
    traces: list[go.Scatter] = []
    for group in groups:
        for k, region in enumerate(group.regions):
            xs, ys = _ring_xy(region.exterior.coords)
            traces.append(
                go.Scatter(
                    x=xs,
                    y=ys,
                    mode="lines",
                    fill="toself",
                    fillcolor=group.color,
                    opacity=REGION_OPACITY,
                    line=dict(color="black", width=1),
                    name=f"Material {group.material_id}",
                    legendgroup=f"material-{group.material_id}",
                    showlegend=k == 0,
                    hoverinfo="name",
                )
            )
            for interior in region.interiors:
                hx, hy = _ring_xy(interior.coords)
                traces.append(
                    go.Scatter(
                        x=hx,
                        y=hy,
                        mode="lines",
                        fill="toself",
                        fillcolor="white",
                        line=dict(color="black", width=1),
                        legendgroup=f"material-{group.material_id}",
                        showlegend=False,
                        hoverinfo="skip",
                    )
                )
    return traces


def wireframe_traces(wireframe: MeshWireframe) -> list[go.Scatter]:
    if not wireframe.edges:
        return []

    xs: list[float | None] = []
    ys: list[float | None] = []
    for (x0, y0, _), (x1, y1, _) in wireframe.edges:
        xs.extend([x0, x1, None])
        ys.extend([y0, y1, None])

    return [
        go.Scatter(
            x=xs, y=ys, mode="lines",
            line=dict(color="#444", width=0.5),
            name="Mesh", hoverinfo="skip",
        ),
        go.Scatter(
            x=[p[0] for p in wireframe.points],
            y=[p[1] for p in wireframe.points],
            mode="markers",
            marker=dict(size=2, color="#222"),
            name="Mesh points",
        ),
    ]


def section_figure(
    groups: Sequence[RegionGroup],
    wireframe: MeshWireframe | None = None,
    title: str = "Cross section",
) -> go.Figure:
    """Shaded material regions with the mesh drawn on top."""
    fig = go.Figure()
    for trace in region_traces(groups):
        fig.add_trace(trace)
    if wireframe is not None:
        for trace in wireframe_traces(wireframe):
            fig.add_trace(trace)

    fig.update_layout(
        title=title,
        template="plotly_white",
        xaxis=dict(title="x", zeroline=False),
        yaxis=dict(title="y", scaleanchor="x", scaleratio=1, zeroline=False),
    )
    return fig
