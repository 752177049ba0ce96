from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from speed_dashboard.config.io import load_global_config
from speed_dashboard.core.dataset_loader import load_dataset
from speed_dashboard.ui.callbacks.callbacks_filters import register_filter_callbacks
from speed_dashboard.ui.callbacks.callbacks_render import register_render_callbacks
from speed_dashboard.ui.config import AppConfig
from speed_dashboard.ui.layout.build_layout import build_layout
from speed_dashboard.views.registry import build_view_registry

logger = logging.getLogger(__name__)


def create_app_config(config_root: Path | str = Path("config")) -> AppConfig:
    """Load config, the Dataset (once) and the view registry."""
    config_root = Path(config_root)
    registry = build_view_registry()

    # 1) Load Config
    global_config = load_global_config(config_root, known_view_ids=registry.ids())

    # 2) Load Dataset; a failure leaves it empty and is logged by the loader
    dataset = load_dataset(
        global_config.data_path,
        years=global_config.years,
        year_prefix=global_config.year_column_prefix,
    )

    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
        registry=registry,
        view_ids=list(global_config.view_ids),
    )
    ctx.validate()

    logger.info(
        "App context ready",
        extra={"n_records": len(dataset), "preset": global_config.preset, "views": ctx.view_ids},
    )
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = create_app_config(config_root)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = ctx.global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
