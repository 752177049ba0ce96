from __future__ import annotations

from typing import List, Type

import dash_bootstrap_components as dbc
from dash import dcc, html

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.view_registry import ViewRegistry
from speed_dashboard.ui.helpers import profile_hint
from speed_dashboard.ui.ids import graph_id


def _chart_card(view_cls: Type[BaseView]) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong(view_cls.label),
                        html.Small(profile_hint(view_cls.filter_profile), className="text-muted ms-2"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Loading(
                    type="default",
                    children=dcc.Graph(
                        id=graph_id(view_cls.id),
                        style={"height": "420px"},
                        config={"responsive": True},
                    ),
                ),
            ),
        ],
        className="mb-3",
    )


def build_plot_panel(registry: ViewRegistry, view_ids: List[str]) -> html.Div:
    """Two-column grid with one card per enabled view, in view_ids order."""
    classes = {cls.id: cls for cls in registry.all_classes()}
    cols = [dbc.Col(_chart_card(classes[view_id]), lg=6, md=12) for view_id in view_ids]
    return html.Div(dbc.Row(cols), id="plot-grid")
