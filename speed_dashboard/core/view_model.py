from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Series:
    """One named numeric series; None marks a gap (only the trend view emits gaps)."""
    name: str
    values: List[Optional[Number]] = field(default_factory=list)


@dataclass(frozen=True)
class ChartData:
    """
    Chart-agnostic model for bar and line charts.

    `labels` are the categories along the x axis (or y axis for horizontal
    bars); every series carries one value per label.
    """
    labels: List[str] = field(default_factory=list)
    series: List[Series] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.labels or not self.series

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    label: str


@dataclass(frozen=True)
class ScatterData:
    points: List[Point] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


ViewModel = Union[ChartData, ScatterData]
