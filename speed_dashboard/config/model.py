from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from speed_dashboard.core.filter_state import DEFAULT_TOP_N
from speed_dashboard.core.record import YEAR_COLUMN_PREFIX, YEARS

# Named chart selections; the dashboard has shipped in these three shapes
VIEW_PRESETS: Dict[str, Tuple[str, ...]] = {
    "full": (
        "top_n",
        "trend",
        "most_improved",
        "inequality",
        "correlation",
        "global_average",
        "region_stacked",
        "distribution",
    ),
    "classic": (
        "top_n",
        "trend",
        "most_improved",
        "inequality",
        "correlation",
        "global_average",
        "region_stacked",
    ),
    "compact": (
        "top_n",
        "trend",
        "most_improved",
        "inequality",
        "distribution",
    ),
}
DEFAULT_PRESET = "full"

DEFAULT_DATA_PATH = Path("data") / "internet_speeds.csv"


@dataclass
class GlobalConfig:
    """
    App-wide settings read from global.json.

    `view_ids` is the resolved list of enabled charts: the explicit "views"
    list when given, otherwise the preset's.
    """
    ui_title: str = "Internet Speed Dashboard"
    subtitle: str = "Country speeds 2017-2024"
    data_path: Path = DEFAULT_DATA_PATH
    year_column_prefix: str = YEAR_COLUMN_PREFIX
    years: Tuple[str, ...] = YEARS
    default_top_n: int = DEFAULT_TOP_N
    preset: str = DEFAULT_PRESET
    view_ids: List[str] = field(default_factory=lambda: list(VIEW_PRESETS[DEFAULT_PRESET]))
    config_root: Optional[Path] = None
