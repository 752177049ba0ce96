from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple

import pandas as pd

from speed_dashboard.core.numeric import parse_speed

YEARS: Tuple[str, ...] = ("2017", "2018", "2019", "2020", "2021", "2022", "2023", "2024")
YEAR_COLUMN_PREFIX = "year "

COUNTRY_COLUMN = "country"
REGION_COLUMN = "region"
MAJOR_AREA_COLUMN = "major_area"


@dataclass(frozen=True)
class Record:
    """
    One country's measurements.

    Fields:

    - country: unique identifier within a Dataset
    - region: category label used for grouping
    - major_area: sub-classification, carried through but not used by views
    - values: year label -> speed in Mbps, or None when there is no measurement
    """

    country: str
    region: str
    major_area: str = ""
    values: Mapping[str, Optional[float]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Freeze the mapping so records stay read-only once built
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def value(self, year: str) -> Optional[float]:
        return self.values.get(year)

    def has_value(self, year: str) -> bool:
        return self.values.get(year) is not None


def _clean_label(value: Any) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def normalize_row(
    row: Mapping[str, Any],
    years: Sequence[str] = YEARS,
    year_prefix: str = YEAR_COLUMN_PREFIX,
) -> Optional[Record]:
    """
    Normalise one raw row into a Record.

    Rows without a country are dropped by returning None. Year cells that
    cannot be parsed become missing values, never zero.
    """
    country = _clean_label(row.get(COUNTRY_COLUMN))
    if not country:
        return None

    values = {year: parse_speed(row.get(f"{year_prefix}{year}")) for year in years}

    return Record(
        country=country,
        region=_clean_label(row.get(REGION_COLUMN)),
        major_area=_clean_label(row.get(MAJOR_AREA_COLUMN)),
        values=values,
    )
