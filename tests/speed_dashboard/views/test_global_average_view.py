import pytest
import plotly.graph_objs as go

from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.filter_state import FilterState
from speed_dashboard.core.record import YEARS
from speed_dashboard.views.global_average_view import GlobalAverageView


def _row(country, region, **values):
    row = {"country": country, "region": region, "major_area": ""}
    for year, value in values.items():
        row[f"year {year.lstrip('y')}"] = value
    return row


def _make_dataset():
    return Dataset.build(
        [
            _row("Gamma", "R2", y2024=50),
            _row("Alpha", "R1", y2022=8, y2023=10, y2024=15),
            _row("Beta", "R1", y2023=20, y2024=18),
            _row("Delta", "R2", y2023=5),
            _row("Epsilon", "R3", y2017=3),
        ]
    )


def test_global_average_mean_of_present_values():
    view = GlobalAverageView(dataset=_make_dataset())

    data = view.compute_data(FilterState())

    assert data.labels == list(YEARS)
    averages = dict(zip(data.labels, data.series[0].values))
    assert averages["2017"] == 3.0
    assert averages["2018"] == 0.0
    assert averages["2022"] == 8.0
    assert averages["2023"] == pytest.approx(35.0 / 3)
    assert averages["2024"] == pytest.approx(83.0 / 3)


def test_global_average_region_filter():
    view = GlobalAverageView(dataset=_make_dataset())

    data = view.compute_data(FilterState(region="R2"))

    averages = dict(zip(data.labels, data.series[0].values))
    assert averages["2024"] == 50.0
    assert averages["2023"] == 5.0


def test_global_average_render_figure():
    view = GlobalAverageView(dataset=_make_dataset())
    state = FilterState()

    fig = view.render_figure(view.compute_data(state), state)

    assert isinstance(fig, go.Figure)
    assert fig.data[0].fill == "tozeroy"
