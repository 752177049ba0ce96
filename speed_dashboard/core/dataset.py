from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

import pandas as pd

from speed_dashboard.core.filter_state import is_all_regions
from speed_dashboard.core.record import (
    COUNTRY_COLUMN,
    MAJOR_AREA_COLUMN,
    REGION_COLUMN,
    YEAR_COLUMN_PREFIX,
    YEARS,
    Record,
    normalize_row,
)

if TYPE_CHECKING:
    from speed_dashboard.core.filter_state import FilterState

logger = logging.getLogger(__name__)


class Dataset:
    """
    Immutable collection of per-country speed records.

    Includes:
    - Lookup by country and by region
    - Sorted country/region listings for the filter controls
    - A cached wide DataFrame (one row per country, one column per year)
      used by the views for grouping and ranking

    A Dataset is built once per load; a reload replaces it, it is never
    mutated in place.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        records: Iterable[Record] = (),
        years: Sequence[str] = YEARS,
        name: str = "Internet speeds",
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.file_path = file_path
        self._years: Tuple[str, ...] = tuple(years)

        by_country: Dict[str, Record] = {}
        for record in records:
            if record.country in by_country:
                logger.debug("Dropping duplicate country row", extra={"country": record.country})
                continue
            by_country[record.country] = record

        self._by_country = by_country
        self._records: Tuple[Record, ...] = tuple(by_country.values())

        # ---------------------------------------------------------------------
        # Caches
        # ---------------------------------------------------------------------
        self._frame: Optional[pd.DataFrame] = None
        self._regions: Optional[List[str]] = None

    # -------------------------------------------------------------------------
    # Construction helpers
    # -------------------------------------------------------------------------
    @classmethod
    def build(
        cls,
        rows: Iterable[Mapping[str, Any]],
        years: Sequence[str] = YEARS,
        year_prefix: str = YEAR_COLUMN_PREFIX,
        **kwargs: Any,
    ) -> Dataset:
        """
        Normalise raw rows and collect them into a Dataset.

        Never fails: rows that cannot be normalised are left out.
        """
        records = []
        dropped = 0
        for row in rows:
            record = normalize_row(row, years=years, year_prefix=year_prefix)
            if record is None:
                dropped += 1
                continue
            records.append(record)

        ds = cls(records, years=years, **kwargs)
        logger.info(
            "Dataset built",
            extra={"dataset": ds.name, "n_records": len(ds), "n_dropped": dropped},
        )
        return ds

    @classmethod
    def empty(cls, years: Sequence[str] = YEARS, **kwargs: Any) -> Dataset:
        return cls((), years=years, **kwargs)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------
    @property
    def years(self) -> Tuple[str, ...]:
        return self._years

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def all_countries(self) -> List[str]:
        """Country names, case-sensitive ascending."""
        return sorted(self._by_country)

    def all_regions(self) -> List[str]:
        """Distinct region labels, ascending."""
        if self._regions is None:
            self._regions = sorted({r.region for r in self._records})
        return list(self._regions)

    def by_region(self, region: Optional[str]) -> List[Record]:
        """
        Records in the given region, or every record for the "All" sentinel.
        """
        if is_all_regions(region):
            return list(self._records)
        return [r for r in self._records if r.region == region]

    def by_country(self, name: Optional[str]) -> Optional[Record]:
        """Return the matching Record, or None for an unknown country."""
        if name is None:
            return None
        return self._by_country.get(name)

    def subset_for_state(self, state: "FilterState") -> List[Record]:
        """
        Convenience wrapper: the records left after the state's region filter.
        """
        return self.by_region(getattr(state, "region", None))

    def latest_year(self) -> Optional[str]:
        """
        Most recent year with at least one measurement. Falls back to the last
        configured year when nothing has data, or None with no years at all.
        """
        for year in reversed(self._years):
            if any(r.has_value(year) for r in self._records):
                return year
        return self._years[-1] if self._years else None

    # -------------------------------------------------------------------------
    # DataFrame access (cached)
    # -------------------------------------------------------------------------
    def to_frame(self) -> pd.DataFrame:
        """
        Wide DataFrame: country, region, major_area and one float column per
        year, NaN where a measurement is missing. Callers must not mutate it.
        """
        if self._frame is not None:
            return self._frame

        columns = [COUNTRY_COLUMN, REGION_COLUMN, MAJOR_AREA_COLUMN, *self._years]
        rows = [
            [r.country, r.region, r.major_area, *(r.value(y) for y in self._years)]
            for r in self._records
        ]
        df = pd.DataFrame(rows, columns=columns)
        for year in self._years:
            df[year] = pd.to_numeric(df[year], errors="coerce").astype(float)

        self._frame = df
        return df

    def frame_for_state(self, state: "FilterState") -> pd.DataFrame:
        """to_frame() restricted to the state's region filter."""
        df = self.to_frame()
        region = getattr(state, "region", None)
        if is_all_regions(region):
            return df
        return df[df[REGION_COLUMN] == region]
