"""In-memory registry of analysis units.

Each unit owns one SectionAnalysis and a lock; requests against the same
unit run one at a time, different units run independently.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from crosssection import SectionAnalysis


@dataclass
class AnalysisUnit:
    unit_id: str
    analysis: SectionAnalysis = field(default_factory=SectionAnalysis)
    lock: threading.Lock = field(default_factory=threading.Lock)


class UnitRegistry:
    def __init__(self) -> None:
        self._units: dict[str, AnalysisUnit] = {}
        self._guard = threading.Lock()

    def get_or_create(self, unit_id: str) -> AnalysisUnit:
        with self._guard:
            unit = self._units.get(unit_id)
            if unit is None:
                unit = AnalysisUnit(unit_id=unit_id)
                self._units[unit_id] = unit
            return unit

    def get(self, unit_id: str) -> AnalysisUnit | None:
        with self._guard:
            return self._units.get(unit_id)

    def remove(self, unit_id: str) -> bool:
        with self._guard:
            return self._units.pop(unit_id, None) is not None

    def clear(self) -> None:
        with self._guard:
            self._units.clear()
