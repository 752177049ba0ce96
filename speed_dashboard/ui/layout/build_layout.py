from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from speed_dashboard.ui.ids import IDs
from speed_dashboard.ui.layout.build_filter_panel import build_filter_panel
from speed_dashboard.ui.layout.build_navbar import build_navbar
from speed_dashboard.ui.layout.build_plot_panel import build_plot_panel

if TYPE_CHECKING:
    from speed_dashboard.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> html.Div:
    return html.Div(
        [
            dcc.Store(id=IDs.Store.FILTER_STATE),
            build_navbar(ctx.global_config),
            dbc.Container(
                fluid=True,
                children=dbc.Row(
                    [
                        dbc.Col(
                            build_filter_panel(ctx.dataset, ctx.global_config.default_top_n),
                            lg=3,
                            md=12,
                        ),
                        dbc.Col(
                            [
                                html.Div(id=IDs.Control.STATUS_BAR, className="text-muted small mb-2"),
                                build_plot_panel(ctx.registry, ctx.view_ids),
                            ],
                            lg=9,
                            md=12,
                        ),
                    ]
                ),
            ),
        ]
    )
