"""Exception taxonomy for boundary validation and section assembly."""

from __future__ import annotations

from enum import Enum


class GeometryFailure(Enum):
    """Why a boundary curve cannot become a contour."""

    NOT_CLOSED = "NotClosed"
    NOT_POLYLINE = "NotPolyline"
    SELF_INTERSECTING = "SelfIntersecting"


class AssemblyFailure(Enum):
    """Why a section definition could not be assembled or solved."""

    EMPTY_CONTOUR_SET = "EmptyContourSet"
    MISSING_SETTINGS = "MissingSettings"
    INVALID_CONTOUR_ROLE = "InvalidContourRole"
    SOLVER_FAILED = "SolverFailed"


_GEOMETRY_MESSAGES = {
    GeometryFailure.NOT_CLOSED: "Curve is not closed!",
    GeometryFailure.NOT_POLYLINE: "Curve is not polyline!",
    GeometryFailure.SELF_INTERSECTING: "Curve intersects itself!",
}


class SectionError(Exception):
    """Base class for all errors raised by the section pipeline."""


class GeometryError(SectionError, ValueError):
    """A boundary curve failed validation."""

    def __init__(self, failure: GeometryFailure, message: str | None = None) -> None:
        self.failure = failure
        super().__init__(message or _GEOMETRY_MESSAGES[failure])


class AssemblyError(SectionError):
    """The section definition could not be assembled or solved."""

    def __init__(self, failure: AssemblyFailure, message: str) -> None:
        self.failure = failure
        super().__init__(message)
