from __future__ import annotations

import plotly.graph_objects as go

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.filter_state import FilterProfile, FilterState
from speed_dashboard.core.view_model import ChartData, Series


class GlobalAverageView(BaseView):
    """
    Mean speed per year over the filtered countries.

    Only present measurements enter the mean; a year with none reports 0.
    """

    id = "global_average"
    label = "Global Average Speeds Over Years"
    filter_profile = FilterProfile(region=True)

    def compute_data(self, state: FilterState) -> ChartData:
        df = self.filtered_frame(state)
        if df.empty:
            return ChartData()

        years = list(self.dataset.years)
        averages = []
        for year in years:
            present = df[year].dropna()
            averages.append(float(present.mean()) if not present.empty else 0.0)

        return ChartData(labels=years, series=[Series(name="Global Average Mbps", values=averages)])

    def render_figure(self, data: ChartData, state: FilterState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No countries after filtering - adjust filters")

        series = data.series[0]
        fig = go.Figure(
            go.Scatter(
                x=data.labels,
                y=series.values,
                mode="lines+markers",
                name=series.name,
                fill="tozeroy",
                line=dict(color=self.colour(5), width=3, shape="spline"),
            )
        )
        fig.update_layout(
            title="Global Average Speeds Over Years",
            xaxis_title="Year",
            yaxis_title="Speed (Mbps)",
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
