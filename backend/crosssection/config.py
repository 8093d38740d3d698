"""Tolerances, defaults and environment-driven settings.

Everything that is a fixed constant of the section pipeline lives here so
that validation, region derivation and the API agree on the same numbers.
"""

from __future__ import annotations

import logging
import os

# Boundary validation
CLOSURE_TOLERANCE: float = 1e-9
SELF_INTERSECTION_TOLERANCE: float = 1e-4

# Display regions (independent of the validation tolerance)
CURVE_TOLERANCE: float = 1e-2
BOOLEAN_TOLERANCE: float = 1e-3

# Solution settings defaults
DEFAULT_ROUGHNESS: float = 0.01
DEFAULT_MINIMUM_ANGLE: float = 30.0
DEFAULT_PLASTIC_AXIS_ACCURACY: float = 1e-5
DEFAULT_PLASTIC_AXIS_MAX_ITERATIONS: int = 500

# Region shading opacity used by the renderer
REGION_OPACITY: float = 0.6

# Log records
LOG_FORMAT: str = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"


def log_level() -> int:
    """Logging level from ``CROSSSECTION_LOG_LEVEL`` (name or number)."""
    raw = os.getenv("CROSSSECTION_LOG_LEVEL", "INFO").strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


def log_file() -> str | None:
    """Optional log file path from ``CROSSSECTION_LOG_FILE``."""
    return os.getenv("CROSSSECTION_LOG_FILE", "").strip() or None


def cors_origins() -> list[str]:
    raw_origins = os.getenv("CORS_ORIGINS", "")
    parsed = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    if parsed == ["*"]:
        return ["*"]

    defaults = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    return [*defaults, *parsed]
