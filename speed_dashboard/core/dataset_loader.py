from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd

from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.exceptions import DatasetLoadError
from speed_dashboard.core.record import COUNTRY_COLUMN, YEAR_COLUMN_PREFIX, YEARS

logger = logging.getLogger(__name__)


def read_rows(
    path: Path,
    years: Sequence[str] = YEARS,
    year_prefix: str = YEAR_COLUMN_PREFIX,
) -> List[Dict[str, Any]]:
    """
    Read the measurements file into raw row dicts.

    Cells are read as strings so that number parsing happens in one place
    (the record normaliser).

    Raises:
        DatasetLoadError: if the file is missing, unreadable or has no country column
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetLoadError(f"Measurements file not found at {path}.")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError(f"Measurements file {path} is empty.") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise DatasetLoadError(f"Could not parse measurements file {path}: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]

    if COUNTRY_COLUMN not in df.columns:
        raise DatasetLoadError(f"Measurements file {path} has no '{COUNTRY_COLUMN}' column.")

    missing = [f"{year_prefix}{y}" for y in years if f"{year_prefix}{y}" not in df.columns]
    if missing:
        logger.warning(
            "Measurements file is missing year columns; those years will have no data",
            extra={"path": str(path), "missing_columns": missing},
        )

    return df.to_dict(orient="records")


def load_dataset(
    path: Path,
    years: Sequence[str] = YEARS,
    year_prefix: str = YEAR_COLUMN_PREFIX,
    name: str = "Internet speeds",
) -> Dataset:
    """
    Load the measurements file into a Dataset.

    A load failure is logged and yields an empty Dataset, so the dashboard
    stays usable and simply shows no data.
    """
    path = Path(path)
    try:
        rows = read_rows(path, years=years, year_prefix=year_prefix)
    except DatasetLoadError as e:
        logger.error(
            "Failed to load measurements file",
            extra={"path": str(path), "error": str(e)},
        )
        return Dataset.empty(years=years, name=name, file_path=path)

    logger.info("Loading measurements", extra={"path": str(path), "n_rows": len(rows)})
    return Dataset.build(rows, years=years, year_prefix=year_prefix, name=name, file_path=path)
