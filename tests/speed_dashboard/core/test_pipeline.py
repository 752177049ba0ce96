import pytest

from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.filter_state import FilterState
from speed_dashboard.core.pipeline import recompute
from speed_dashboard.core.view_model import ChartData, ScatterData
from speed_dashboard.views import build_view_registry


def _row(country, region, **values):
    row = {"country": country, "region": region, "major_area": ""}
    for year, value in values.items():
        row[f"year {year.lstrip('y')}"] = value
    return row


def _make_dataset():
    return Dataset.build(
        [
            _row("Alpha", "R1", y2023=10, y2024=15),
            _row("Beta", "R1", y2023=20, y2024=18),
            _row("Gamma", "R2", y2024=50),
        ]
    )


def test_recompute_runs_every_registered_view():
    registry = build_view_registry()
    state = FilterState(countries=["Alpha"], year="2024")

    models = recompute(_make_dataset(), state, registry)

    assert list(models) == registry.ids()
    assert isinstance(models["correlation"], ScatterData)
    assert isinstance(models["top_n"], ChartData)
    assert models["top_n"].labels == ["Gamma", "Beta", "Alpha"]
    assert [s.name for s in models["trend"].series] == ["Alpha"]


def test_recompute_selected_views_only():
    registry = build_view_registry()

    models = recompute(_make_dataset(), FilterState(), registry, ["inequality", "top_n"])

    assert list(models) == ["inequality", "top_n"]


def test_recompute_unknown_view_raises():
    with pytest.raises(KeyError):
        recompute(_make_dataset(), FilterState(), build_view_registry(), ["nope"])


def test_recompute_is_idempotent_and_does_not_mutate_state():
    ds = _make_dataset()
    registry = build_view_registry()
    state = FilterState(countries=["Beta", "Alpha"], region="R1", year="2024", top_n=2)
    before = state.to_dict()

    first = recompute(ds, state, registry)
    second = recompute(ds, state, registry)

    assert first == second
    assert state.to_dict() == before
    assert len(ds) == 3


def test_recompute_empty_dataset_gives_empty_models():
    models = recompute(Dataset.empty(), FilterState(countries=["Alpha"]), build_view_registry())

    assert all(model.is_empty for model in models.values())
