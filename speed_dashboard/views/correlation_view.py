from __future__ import annotations

import plotly.graph_objects as go

from speed_dashboard.core.base_view import BaseView
from speed_dashboard.core.filter_state import FilterProfile, FilterState
from speed_dashboard.core.numeric import previous_year
from speed_dashboard.core.record import COUNTRY_COLUMN
from speed_dashboard.core.view_model import Point, ScatterData


class CorrelationView(BaseView):
    """
    Speed vs improvement: one point per country.

    x is the speed for the selected year, y the change from the previous
    year. Missing measurements (and a previous year outside the data) count as 0.
    """

    id = "correlation"
    label = "Speed vs Improvement"
    filter_profile = FilterProfile(region=True, year=True)

    def compute_data(self, state: FilterState) -> ScatterData:
        df = self.filtered_frame(state)
        year = self.resolve_year(state)
        if df.empty:
            return ScatterData()

        df = df.sort_values(COUNTRY_COLUMN, kind="mergesort")
        speed = self.values_or_zero(df, year)
        improvement = speed - self.values_or_zero(df, previous_year(year) if year else None)

        points = [
            Point(x=float(x), y=float(y), label=str(country))
            for country, x, y in zip(df[COUNTRY_COLUMN], speed, improvement)
        ]
        return ScatterData(points=points)

    def render_figure(self, data: ScatterData, state: FilterState) -> go.Figure:
        if data is None or data.is_empty:
            return self.empty_figure("No countries after filtering - adjust filters")

        fig = go.Figure(
            go.Scatter(
                x=[p.x for p in data.points],
                y=[p.y for p in data.points],
                text=[p.label for p in data.points],
                mode="markers",
                name="Country",
                marker=dict(color=self.colour(3), size=9),
                hovertemplate="%{text}<br>Speed: %{x:.1f} Mbps<br>Improvement: %{y:.1f} Mbps<extra></extra>",
            )
        )
        fig.update_layout(
            title="Speed vs Improvement",
            xaxis_title="Speed (Mbps)",
            yaxis_title="Improvement (Mbps)",
            margin=dict(l=40, r=40, t=60, b=40),
        )
        return fig
