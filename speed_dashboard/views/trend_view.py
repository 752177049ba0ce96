from __future__ import annotations

from typing import List

import plotly.graph_objects as go

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.filter_state import FilterProfile, FilterState
from speed_dashboard.core.view_model import ChartData, Series


class TrendView(BaseView):
    """
    Line per selected country across every year.

    Missing years stay as gaps (None), unlike the other views. Countries are
    looked up in the whole dataset, so an explicit selection is not hidden by
    the region filter; unknown countries are skipped.
    """

    id = "trend"
    label = "Country Trend Over Years"
    filter_profile = FilterProfile(countries=True)

    def compute_data(self, state: FilterState) -> ChartData:
        years = list(self.dataset.years)
        series: List[Series] = []
        seen = set()

        for country in state.countries or []:
            if country in seen:
                continue
            seen.add(country)

            record = self.dataset.by_country(country)
            if record is None:
                continue
            series.append(Series(name=record.country, values=[record.value(y) for y in years]))

        if not series:
            return ChartData()
        return ChartData(labels=years, series=series)

    def render_figure(self, data: ChartData, state: FilterState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("Select one or more countries to see their trend")

        fig = go.Figure()
        for i, series in enumerate(data.series):
            fig.add_trace(
                go.Scatter(
                    x=data.labels,
                    y=series.values,
                    mode="lines+markers",
                    name=series.name,
                    line=dict(color=self.colour(i), width=3, shape="spline"),
                    connectgaps=False,
                )
            )
        fig.update_layout(
            title="Country Trend Over Years",
            xaxis_title="Year",
            yaxis_title="Speed (Mbps)",
            hovermode="x unified",
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
