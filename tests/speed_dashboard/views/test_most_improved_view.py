import plotly.graph_objs as go

from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.filter_state import FilterState
from speed_dashboard.views.most_improved_view import MostImprovedView


def _row(country, region, **values):
    row = {"country": country, "region": region, "major_area": ""}
    for year, value in values.items():
        row[f"year {year.lstrip('y')}"] = value
    return row


def test_most_improved_literal_difference():
    ds = Dataset.build(
        [
            _row("Alpha", "R1", y2023=10, y2024=15),
            _row("Beta", "R1", y2023=20, y2024=18),
        ]
    )
    view = MostImprovedView(dataset=ds)

    data = view.compute_data(FilterState())

    assert data.labels == ["Alpha", "Beta"]
    assert data.series[0].values == [5.0, -2.0]


def test_most_improved_missing_year_counts_as_zero():
    ds = Dataset.build(
        [
            _row("Alpha", "R1", y2023=10, y2024=15),
            _row("Newcomer", "R1", y2024=50),
            _row("Dropped", "R2", y2023=5),
        ]
    )
    view = MostImprovedView(dataset=ds)

    data = view.compute_data(FilterState())

    # 50 - 0 and 0 - 5
    assert data.labels == ["Newcomer", "Alpha", "Dropped"]
    assert data.series[0].values == [50.0, 5.0, -5.0]


def test_most_improved_top_ten_with_tie_break():
    rows = [_row(f"C{i:02d}", "R1", y2023=0, y2024=i) for i in range(12)]
    rows.append(_row("B-tie", "R1", y2023=0, y2024=11))
    view = MostImprovedView(dataset=Dataset.build(rows))

    data = view.compute_data(FilterState())

    assert len(data.labels) == 10
    assert data.labels[:3] == ["B-tie", "C11", "C10"]
    values = data.series[0].values
    assert values == sorted(values, reverse=True)


def test_most_improved_region_filter():
    ds = Dataset.build(
        [
            _row("Alpha", "R1", y2023=10, y2024=15),
            _row("Gamma", "R2", y2024=50),
        ]
    )
    view = MostImprovedView(dataset=ds)

    data = view.compute_data(FilterState(region="R1"))

    assert data.labels == ["Alpha"]


def test_most_improved_render_figure_horizontal():
    ds = Dataset.build([_row("Alpha", "R1", y2023=10, y2024=15), _row("Beta", "R1", y2023=20, y2024=18)])
    view = MostImprovedView(dataset=ds)
    state = FilterState()

    fig = view.render_figure(view.compute_data(state), state)

    assert isinstance(fig, go.Figure)
    assert fig.data[0].orientation == "h"
    # largest gain drawn last so it ends up on top
    assert list(fig.data[0].y) == ["Beta", "Alpha"]
