from __future__ import annotations

import math
from typing import List, Tuple

import pandas as pd
import plotly.graph_objects as go

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.filter_state import FilterProfile, FilterState
from speed_dashboard.core.view_model import ChartData, Series

# Half-open [lower, upper) bins
SPEED_BINS: Tuple[float, ...] = (0.0, 10.0, 50.0, 100.0, 200.0, math.inf)
BIN_LABELS: List[str] = ["0-10", "10-50", "50-100", "100-200", "200+"]


class DistributionView(BaseView):
    """
    Histogram of countries by speed band for the selected year.

    Every filtered country lands in exactly one band; a missing measurement
    counts as 0 and falls into the first band.
    """

    id = "distribution"
    label = "Speed Distribution"
    filter_profile = FilterProfile(region=True, year=True)

    def compute_data(self, state: FilterState) -> ChartData:
        df = self.filtered_frame(state)
        year = self.resolve_year(state)
        if df.empty:
            return ChartData()

        bands = pd.cut(
            self.values_or_zero(df, year),
            bins=list(SPEED_BINS),
            right=False,
            labels=BIN_LABELS,
        )
        counts = bands.value_counts(sort=False).reindex(BIN_LABELS, fill_value=0)

        return ChartData(
            labels=list(BIN_LABELS),
            series=[Series(name="Countries", values=[int(c) for c in counts])],
        )

    def render_figure(self, data: ChartData, state: FilterState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No countries after filtering - adjust filters")

        series = data.series[0]
        fig = go.Figure(
            go.Bar(x=data.labels, y=series.values, name=series.name, marker_color=self.colour(4))
        )
        fig.update_layout(
            title=f"Speed Distribution ({self.resolve_year(state)})",
            xaxis_title="Speed band (Mbps)",
            yaxis_title="# countries",
            bargap=0.05,
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
