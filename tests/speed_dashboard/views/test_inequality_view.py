import plotly.graph_objs as go

from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.filter_state import FilterState
from speed_dashboard.views.inequality_view import InequalityView


def _row(country, region, **values):
    row = {"country": country, "region": region, "major_area": ""}
    for year, value in values.items():
        row[f"year {year.lstrip('y')}"] = value
    return row


def _make_dataset():
    return Dataset.build(
        [
            _row("Gamma", "R2", y2024=50),
            _row("Alpha", "R1", y2023=10, y2024=15),
            _row("Beta", "R1", y2023=20, y2024=18),
            _row("Delta", "R2", y2023=5),
            _row("Epsilon", "R3", y2017=3),
        ]
    )


def test_inequality_max_minus_min_per_region():
    view = InequalityView(dataset=_make_dataset())

    data = view.compute_data(FilterState(year="2024"))

    # regions sorted; R2 counts Delta's missing 2024 as 0; R3 has one record
    assert data.labels == ["R1", "R2", "R3"]
    assert data.series[0].values == [3.0, 50.0, 0.0]
    assert data.series[0].name == "DII (Mbps)"


def test_inequality_other_year():
    view = InequalityView(dataset=_make_dataset())

    data = view.compute_data(FilterState(year="2023"))

    assert data.series[0].values == [10.0, 5.0, 0.0]


def test_inequality_single_record_region_is_zero():
    ds = Dataset.build([_row("Solo", "R9", y2024=42)])
    view = InequalityView(dataset=ds)

    data = view.compute_data(FilterState(year="2024"))

    assert data.labels == ["R9"]
    assert data.series[0].values == [0.0]


def test_inequality_region_filter():
    view = InequalityView(dataset=_make_dataset())

    data = view.compute_data(FilterState(region="R1", year="2024"))

    assert data.labels == ["R1"]
    assert data.series[0].values == [3.0]


def test_inequality_render_figure():
    view = InequalityView(dataset=_make_dataset())
    state = FilterState(year="2024")

    fig = view.render_figure(view.compute_data(state), state)

    assert isinstance(fig, go.Figure)
    assert list(fig.data[0].x) == ["R1", "R2", "R3"]
