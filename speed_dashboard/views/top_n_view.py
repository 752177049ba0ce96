from __future__ import annotations

import plotly.graph_objects as go

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.filter_state import FilterProfile, FilterState
from speed_dashboard.core.numeric import format_mbps
from speed_dashboard.core.record import COUNTRY_COLUMN
from speed_dashboard.core.view_model import ChartData, Series


class TopNView(BaseView):
    """
    Ranking: the N fastest countries for the selected year.

    Countries without a measurement for the year are left out. Ties are
    broken by ascending country name so the ordering is stable.
    """

    id = "top_n"
    label = "Top Countries by Speed"
    filter_profile = FilterProfile(region=True, year=True, top_n=True)

    def compute_data(self, state: FilterState) -> ChartData:
        df = self.filtered_frame(state)
        year = self.resolve_year(state)
        if df.empty or year is None or year not in df.columns:
            return ChartData()

        top_n = self.resolve_top_n(state)

        ranked = (
            df.loc[df[year].notna(), [COUNTRY_COLUMN, year]]
            .sort_values([year, COUNTRY_COLUMN], ascending=[False, True], kind="mergesort")
            .head(top_n)
        )

        return ChartData(
            labels=ranked[COUNTRY_COLUMN].tolist(),
            series=[Series(name=f"Speed (Mbps) {year}", values=[float(v) for v in ranked[year]])],
        )

    def render_figure(self, data: ChartData, state: FilterState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No measurements for this year - adjust filters")

        series = data.series[0]
        fig = go.Figure(
            go.Bar(
                x=data.labels,
                y=series.values,
                text=[format_mbps(v) for v in series.values],
                name=series.name,
                marker_color=self.colour(0),
            )
        )
        fig.update_layout(
            title=f"Top {len(data.labels)} Countries by Speed",
            xaxis_title="Country",
            yaxis_title="Speed (Mbps)",
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
