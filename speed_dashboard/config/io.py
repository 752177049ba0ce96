from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from speed_dashboard.config.model import DEFAULT_DATA_PATH, DEFAULT_PRESET, VIEW_PRESETS, GlobalConfig
from speed_dashboard.core.exceptions import ConfigError
from speed_dashboard.core.filter_state import DEFAULT_TOP_N, MAX_TOP_N
from speed_dashboard.core.record import YEAR_COLUMN_PREFIX, YEARS

logger = logging.getLogger(__name__)

DATA_ROOT_ENV = "SPEED_DASHBOARD_DATA_ROOT"


def _resolve_data_path(raw_path: str | Path, root: Path) -> Path:
    """
    Relative paths resolve against SPEED_DASHBOARD_DATA_ROOT when set,
    otherwise against the parent of the config directory (the project root).
    """
    path = Path(raw_path)
    if path.is_absolute():
        return path

    data_root = os.environ.get(DATA_ROOT_ENV)
    if data_root:
        root_path = Path(data_root)
        resolved = root_path / path
        # Fallback for redundant 'data/' prefix
        if not resolved.is_file() and path.parts and path.parts[0] == "data":
            alt_path = root_path / Path(*path.parts[1:])
            if alt_path.is_file():
                resolved = alt_path
        return resolved

    return (root.parent / path).resolve()


def _resolve_view_ids(raw: Dict[str, Any], known_ids: Optional[Iterable[str]]) -> tuple[str, List[str]]:
    preset = raw.get("preset", DEFAULT_PRESET)
    if preset not in VIEW_PRESETS:
        raise ConfigError(f"Unknown view preset '{preset}'; expected one of {sorted(VIEW_PRESETS)}")

    views = raw.get("views")
    if views is None:
        view_ids = list(VIEW_PRESETS[preset])
    elif isinstance(views, list) and all(isinstance(v, str) for v in views):
        view_ids = list(dict.fromkeys(views))
    else:
        raise ConfigError("'views' must be a list of view ids")

    if known_ids is not None:
        known = set(known_ids)
        unknown = [v for v in view_ids if v not in known]
        if unknown:
            raise ConfigError(f"Unknown view id(s) in config: {unknown}")

    return preset, view_ids


def load_global_config(root: Path | str, known_view_ids: Optional[Iterable[str]] = None) -> GlobalConfig:
    """
    Load global.json from the config directory.

    A missing file means defaults. Invalid JSON or badly typed values raise
    ConfigError.
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        logger.warning(f"No global.json found in {root}; using defaults")
        raw: Dict[str, Any] = {}
    else:
        try:
            with global_path.open() as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    years = raw.get("years", list(YEARS))
    if not isinstance(years, list) or not years:
        raise ConfigError("'years' must be a non-empty list")
    years = tuple(str(y) for y in years)

    default_top_n = raw.get("default_top_n", DEFAULT_TOP_N)
    if isinstance(default_top_n, bool) or not isinstance(default_top_n, int) or not 1 <= default_top_n <= MAX_TOP_N:
        raise ConfigError(f"'default_top_n' must be an integer between 1 and {MAX_TOP_N}")

    preset, view_ids = _resolve_view_ids(raw, known_view_ids)

    return GlobalConfig(
        ui_title=raw.get("ui_title", "Internet Speed Dashboard"),
        subtitle=raw.get("subtitle", "Country speeds 2017-2024"),
        data_path=_resolve_data_path(raw.get("data_path", DEFAULT_DATA_PATH), root),
        year_column_prefix=raw.get("year_column_prefix", YEAR_COLUMN_PREFIX),
        years=years,
        default_top_n=default_top_n,
        preset=preset,
        view_ids=view_ids,
        config_root=root,
    )
