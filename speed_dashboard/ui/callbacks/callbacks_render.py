from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

import dash
import plotly.graph_objs as go
from dash import Input, Output

from speed_dashboard.core.filter_state import FilterState, is_all_regions
from speed_dashboard.core.pipeline import recompute
from speed_dashboard.ui.ids import IDs, graph_id

if TYPE_CHECKING:
    from speed_dashboard.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def status_text(ctx: AppConfig, state: FilterState) -> str:
    region = "all regions" if is_all_regions(state.region) else state.region
    n = len(ctx.dataset.subset_for_state(state))
    return f"{n} countries in {region} · year {state.year or '-'} · top {state.top_n}"


def render_all(ctx: AppConfig, fs_data: dict[str, Any] | None) -> List[go.Figure]:
    """
    FilterState store -> one figure per enabled view, in ctx.view_ids order.

    Failures never propagate to Dash: a bad state or a failing view is
    logged and replaced by a message figure.
    """
    n_views = len(ctx.view_ids)

    if ctx.dataset.is_empty:
        return [
            _message_figure(
                "No data loaded.",
                "The measurements file could not be read. Check the logs and the configured data_path.",
            )
        ] * n_views

    if fs_data is None:
        return [_message_figure("Waiting for filters...")] * n_views

    try:
        state = FilterState.from_dict(fs_data)
    except Exception:
        logger.exception("Invalid filter state in render callback: %r", fs_data)
        return [_error_figure("Internal error: invalid filter state.")] * n_views

    try:
        models = recompute(ctx.dataset, state, ctx.registry, ctx.view_ids)
    except Exception:
        logger.exception("Error in recompute", extra={"filter_state": fs_data})
        return [_error_figure("The app hit an unexpected error while computing the charts.")] * n_views

    figures: List[go.Figure] = []
    for view_id in ctx.view_ids:
        try:
            view = ctx.registry.create(view_id, ctx.dataset)
            figures.append(view.render_figure(models[view_id], state))
        except Exception:
            logger.exception("Error rendering view", extra={"view_id": view_id, "filter_state": fs_data})
            figures.append(_error_figure(f"View '{view_id}' could not be rendered."))
    return figures


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # FilterState -> every chart + status bar
    # ---------------------------------------------------------
    outputs = [Output(graph_id(view_id), "figure") for view_id in ctx.view_ids]
    outputs.append(Output(IDs.Control.STATUS_BAR, "children"))

    @app.callback(outputs, Input(IDs.Store.FILTER_STATE, "data"))
    def update_graphs_from_state(fs_data: dict[str, Any] | None):
        figures = render_all(ctx, fs_data)
        status = status_text(ctx, FilterState.from_dict(fs_data)) if fs_data else ""
        return [*figures, status]
