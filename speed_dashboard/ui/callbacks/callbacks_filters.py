from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
from dash import Input, Output

from speed_dashboard.core.filter_state import normalize_filters
from speed_dashboard.ui.ids import IDs

if TYPE_CHECKING:
    from speed_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


def year_from_slider(years: List[str], position: Any) -> Optional[str]:
    """Slider positions index into the year labels; anything else is None."""
    try:
        index = int(position)
    except (TypeError, ValueError):
        return None
    if 0 <= index < len(years):
        return years[index]
    return None


def build_filter_state(
    ctx: AppConfig,
    countries: Optional[List[str]],
    region: Optional[str],
    year_position: Any,
    top_n: Any,
) -> Dict[str, Any]:
    """Raw control values -> serialised FilterState for the store."""
    years = list(ctx.dataset.years)
    state = normalize_filters(
        {
            "countries": countries,
            "region": region,
            "year": year_from_slider(years, year_position),
            "top_n": top_n,
        },
        available_years=years,
        default_year=ctx.dataset.latest_year(),
        default_top_n=ctx.global_config.default_top_n,
    )
    return state.to_dict()


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Any control change -> FilterState store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Control.YEAR_LABEL, "children"),
        Input(IDs.Control.COUNTRY_SELECT, "value"),
        Input(IDs.Control.REGION_SELECT, "value"),
        Input(IDs.Control.YEAR_SLIDER, "value"),
        Input(IDs.Control.TOP_N_INPUT, "value"),
    )
    def update_filter_state(countries, region, year_position, top_n):
        fs = build_filter_state(ctx, countries, region, year_position, top_n)
        logger.debug("filter_state_changed", extra={"filter_state": fs})
        return fs, fs["year"] or "-"
