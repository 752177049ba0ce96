from __future__ import annotations

import plotly.graph_objects as go

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.filter_state import FilterProfile, FilterState
from speed_dashboard.core.record import REGION_COLUMN
from speed_dashboard.core.view_model import ChartData, Series


class InequalityView(BaseView):
    """
    Digital Inequality Index: max - min speed per region for the selected year.

    Missing measurements count as 0 before the min/max, so a region where
    any country lacks data reports the top speed as its spread.
    """

    id = "inequality"
    label = "Regional Digital Inequality"
    filter_profile = FilterProfile(region=True, year=True)

    def compute_data(self, state: FilterState) -> ChartData:
        df = self.filtered_frame(state)
        year = self.resolve_year(state)
        if df.empty:
            return ChartData()

        spread = (
            df[[REGION_COLUMN]]
            .assign(value=self.values_or_zero(df, year))
            .groupby(REGION_COLUMN, sort=True)["value"]
            .agg(["max", "min"])
        )
        dii = spread["max"] - spread["min"]

        return ChartData(
            labels=[str(r) for r in dii.index],
            series=[Series(name="DII (Mbps)", values=[float(v) for v in dii])],
        )

    def render_figure(self, data: ChartData, state: FilterState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No regions after filtering - adjust filters")

        series = data.series[0]
        fig = go.Figure(
            go.Bar(x=data.labels, y=series.values, name=series.name, marker_color=self.colour(2))
        )
        fig.update_layout(
            title="Regional Digital Inequality",
            xaxis_title="Region",
            yaxis_title=series.name,
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
