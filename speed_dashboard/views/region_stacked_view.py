from __future__ import annotations

import plotly.graph_objects as go

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.filter_state import FilterProfile, FilterState
from speed_dashboard.core.record import REGION_COLUMN
from speed_dashboard.core.view_model import ChartData, Series


class RegionStackedView(BaseView):
    """
    Region comparison over years: per region, the summed speeds of its
    countries, one stacked series per year (missing counts as 0).
    """

    id = "region_stacked"
    label = "Region Comparison Over Years"
    filter_profile = FilterProfile(region=True)

    def compute_data(self, state: FilterState) -> ChartData:
        df = self.filtered_frame(state)
        if df.empty:
            return ChartData()

        years = list(self.dataset.years)
        totals = (
            df[[REGION_COLUMN, *years]]
            .fillna({y: 0.0 for y in years})
            .groupby(REGION_COLUMN, sort=True)[years]
            .sum()
        )

        return ChartData(
            labels=[str(r) for r in totals.index],
            series=[Series(name=y, values=[float(v) for v in totals[y]]) for y in years],
        )

    def render_figure(self, data: ChartData, state: FilterState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No regions after filtering - adjust filters")

        fig = go.Figure()
        for i, series in enumerate(data.series):
            fig.add_bar(x=data.labels, y=series.values, name=series.name, marker_color=self.colour(i))

        fig.update_layout(
            barmode="stack",
            title="Region Comparison Over Years",
            xaxis_title="Region",
            yaxis_title="Total speed (Mbps)",
            legend_title="Year",
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
