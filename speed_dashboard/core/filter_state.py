from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from speed_dashboard.core.numeric import clamp_int

ALL_REGIONS = "All"
DEFAULT_TOP_N = 10
MAX_TOP_N = 200


def is_all_regions(region: Optional[str]) -> bool:
    """True for the "All" sentinel (any casing), None or an empty string."""
    if region is None:
        return True
    region = str(region).strip()
    return not region or region.lower() == ALL_REGIONS.lower()


@dataclass
class FilterState:
    """
    Represents the current user selection/filters.

    Fields:

    - countries: countries selected by the user, in selection order
    - region: region label, or the "All" sentinel for no region filter
    - year: year label (e.g. "2024"); None means the most recent year with data
    - top_n: number of entries in ranking views
    """

    countries: List[str] = field(default_factory=list)
    region: str = ALL_REGIONS
    year: Optional[str] = None
    top_n: int = DEFAULT_TOP_N

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(
            countries=list(data.get("countries", [])),
            region=data.get("region") or ALL_REGIONS,
            year=data.get("year"),
            top_n=data.get("top_n", DEFAULT_TOP_N),
        )


@dataclass(frozen=True)
class FilterProfile:
    """
    Represents the filter controls a view reads.

    :param countries: the country multi-select
    :param region: the region dropdown
    :param year: the year slider
    :param top_n: the top-N input
    """
    countries: bool = False
    region: bool = False
    year: bool = False
    top_n: bool = False


def _as_str_list(values: Optional[Iterable[object]]) -> List[str]:
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    out: List[str] = []
    for v in values:
        if v is None:
            continue
        s = str(v).strip()
        if s and s not in out:
            out.append(s)
    return out


def normalize_filters(
    raw: Optional[Dict[str, Any]],
    *,
    available_years: Sequence[str] = (),
    default_year: Optional[str] = None,
    default_top_n: int = DEFAULT_TOP_N,
) -> FilterState:
    """
    Build a FilterState from raw UI values, falling back to defaults for
    anything absent or malformed.
    """
    raw = raw or {}

    countries = _as_str_list(raw.get("countries"))

    region = raw.get("region")
    region = ALL_REGIONS if is_all_regions(region) else str(region).strip()

    year = raw.get("year")
    year = None if year is None else str(year).strip()
    if available_years and year not in available_years:
        year = default_year if default_year in available_years else available_years[-1]
    elif not year:
        year = default_year

    top_n = clamp_int(raw.get("top_n"), default_top_n, 0, MAX_TOP_N)
    if top_n < 1:
        top_n = default_top_n

    return FilterState(countries=countries, region=region, year=year, top_n=top_n)
