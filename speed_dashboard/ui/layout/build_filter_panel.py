from __future__ import annotations

from typing import Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.filter_state import ALL_REGIONS, MAX_TOP_N
from speed_dashboard.ui.helpers import dataset_summary, get_filter_dropdown_options, year_slider_marks
from speed_dashboard.ui.ids import IDs


def build_filter_panel(dataset: Dataset, default_top_n: int) -> dbc.Card:
    country_options, region_options = get_filter_dropdown_options(dataset)

    latest: Optional[str] = dataset.latest_year()
    year_index = dataset.years.index(latest) if latest in dataset.years else 0

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div([
                        html.H5(dataset.name, id=IDs.Control.SIDEBAR_DATASET_NAME, className="card-title"),
                        html.P(
                            dataset_summary(dataset),
                            id=IDs.Control.SIDEBAR_DATASET_META,
                            className="card-subtitle text-muted mb-3",
                        ),
                        html.Hr(),
                    ]),
                    html.Label("Countries", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.COUNTRY_SELECT,
                        options=country_options,
                        multi=True,
                        placeholder="Select countries for the trend chart",
                        className="mb-3",
                    ),
                    html.Label("Region", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.REGION_SELECT,
                        options=region_options,
                        value=ALL_REGIONS,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Label(
                        ["Year: ", html.Span(latest or "-", id=IDs.Control.YEAR_LABEL)],
                        className="form-label",
                    ),
                    dcc.Slider(
                        id=IDs.Control.YEAR_SLIDER,
                        min=0,
                        max=max(len(dataset.years) - 1, 0),
                        step=1,
                        value=year_index,
                        marks=year_slider_marks(dataset),
                        className="mb-3",
                    ),
                    html.Label("Top N", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.TOP_N_INPUT,
                        type="number",
                        min=1,
                        max=MAX_TOP_N,
                        step=1,
                        value=default_top_n,
                        className="mb-3",
                    ),
                ]
            ),
        ],
        className="speed-sidebar",
    )
