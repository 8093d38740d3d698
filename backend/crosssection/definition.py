"""Section definition and its solver output bag."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from .types import SectionContour, SolutionSettings


@dataclass
class SectionProperties:
    """Scalar section properties written by the solver.

    Names follow ``sectionproperties``. For sections with more than one
    material the moments, moduli and stiffness-type values are modulus
    weighted. Shear centre and plastic centroid offsets are measured from
    the centroid; use the point properties for absolute coordinates.
    """

    # geometric / elastic
    area: float = 0.0
    perimeter: float = 0.0
    ea: float = 0.0
    e_eff: float = 0.0
    nu_eff: float = 0.0
    qx: float = 0.0
    qy: float = 0.0
    ixx_g: float = 0.0
    iyy_g: float = 0.0
    ixy_g: float = 0.0
    cx: float = 0.0
    cy: float = 0.0
    ixx_c: float = 0.0
    iyy_c: float = 0.0
    ixy_c: float = 0.0
    zxx_plus: float = 0.0
    zxx_minus: float = 0.0
    zyy_plus: float = 0.0
    zyy_minus: float = 0.0
    rx_c: float = 0.0
    ry_c: float = 0.0
    i11_c: float = 0.0
    i22_c: float = 0.0
    phi: float = 0.0
    z11_plus: float = 0.0
    z11_minus: float = 0.0
    z22_plus: float = 0.0
    z22_minus: float = 0.0
    r11_c: float = 0.0
    r22_c: float = 0.0

    # warping
    j: float = 0.0
    Delta_s: float = 0.0
    x_se: float = 0.0
    y_se: float = 0.0
    x_st: float = 0.0
    y_st: float = 0.0
    gamma: float = 0.0
    A_sx: float = 0.0
    A_sy: float = 0.0
    A_sxy: float = 0.0
    A_s11: float = 0.0
    A_s22: float = 0.0

    # plastic
    x_pc: float = 0.0
    y_pc: float = 0.0
    sxx: float = 0.0
    syy: float = 0.0
    s11: float = 0.0
    s22: float = 0.0

    calculated: bool = False
    warping_calculated: bool = False
    plastic_calculated: bool = False
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def scalar_names(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.type in ("float", float)]

    @property
    def centroid(self) -> tuple[float, float]:
        return (self.cx, self.cy)

    @property
    def elastic_shear_centre(self) -> tuple[float, float]:
        return (self.cx + self.x_se, self.cy + self.y_se)

    @property
    def trefftz_shear_centre(self) -> tuple[float, float]:
        return (self.cx + self.x_st, self.cy + self.y_st)

    @property
    def plastic_centroid(self) -> tuple[float, float]:
        return (self.cx + self.x_pc, self.cy + self.y_pc)


@dataclass
class SectionDefinition:
    """All contours plus settings submitted to the solver as one unit.

    Equality is structural over contours, settings and output, so two fresh
    instances compare equal. ``generation`` identifies the input snapshot
    the definition was assembled from and is not part of equality.
    """

    contours: list[SectionContour] = field(default_factory=list)
    settings: SolutionSettings | None = None
    output: SectionProperties = field(default_factory=SectionProperties)
    generation: int = field(default=0, compare=False)
    # meshed solver geometry, shared by the solve and triangulate steps
    geometry: Any = field(default=None, compare=False, repr=False)

    def is_default(self) -> bool:
        return self == SectionDefinition()

    @property
    def outer_contours(self) -> list[SectionContour]:
        return [c for c in self.contours if not c.is_hole]

    @property
    def holes(self) -> list[SectionContour]:
        return [c for c in self.contours if c.is_hole]
