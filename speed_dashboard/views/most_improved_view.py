from __future__ import annotations

import plotly.graph_objects as go

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.filter_state import FilterProfile, FilterState
from speed_dashboard.core.record import COUNTRY_COLUMN
from speed_dashboard.core.view_model import ChartData, Series


class MostImprovedView(BaseView):
    """
    Countries ranked by speed gain between two fixed years.

    Missing measurements count as 0 on both sides, so a country first
    measured in `year_to` shows its whole speed as the gain. This matches the
    figures the dashboard has always reported.
    """

    id = "most_improved"
    label = "Most Improved Countries"
    filter_profile = FilterProfile(region=True)

    year_from = "2023"
    year_to = "2024"
    limit = 10

    def compute_data(self, state: FilterState) -> ChartData:
        df = self.filtered_frame(state)
        if df.empty:
            return ChartData()

        deltas = df[[COUNTRY_COLUMN]].assign(
            change=self.values_or_zero(df, self.year_to) - self.values_or_zero(df, self.year_from)
        )
        ranked = deltas.sort_values(
            ["change", COUNTRY_COLUMN], ascending=[False, True], kind="mergesort"
        ).head(self.limit)

        return ChartData(
            labels=ranked[COUNTRY_COLUMN].tolist(),
            series=[Series(name="Mbps Increase", values=[float(v) for v in ranked["change"]])],
        )

    def render_figure(self, data: ChartData, state: FilterState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No countries after filtering - adjust filters")

        series = data.series[0]
        # Horizontal bars, largest gain on top
        fig = go.Figure(
            go.Bar(
                x=series.values[::-1],
                y=data.labels[::-1],
                orientation="h",
                name=series.name,
                marker_color=self.colour(1),
            )
        )
        fig.update_layout(
            title=f"Most Improved Countries ({self.year_from} to {self.year_to})",
            xaxis_title="Mbps Increase",
            yaxis_title="Country",
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
