import pytest

from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.view_registry import ViewRegistry
from speed_dashboard.views import TopNView, TrendView, build_view_registry


class NotAView:
    id = "not_a_view"


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(TopNView)
    registry.register(TrendView)

    assert registry.ids() == ["top_n", "trend"]
    assert "top_n" in registry
    view = registry.create("top_n", Dataset.empty())
    assert isinstance(view, TopNView)


def test_register_rejects_non_views():
    registry = ViewRegistry()
    with pytest.raises(TypeError):
        registry.register(NotAView)


def test_register_rejects_duplicate_ids():
    registry = ViewRegistry()
    registry.register(TopNView)
    with pytest.raises(ValueError):
        registry.register(TopNView)


def test_create_unknown_view():
    with pytest.raises(KeyError):
        ViewRegistry().create("missing", Dataset.empty())


def test_build_view_registry_has_every_chart():
    registry = build_view_registry()

    assert registry.ids() == [
        "top_n",
        "trend",
        "most_improved",
        "inequality",
        "correlation",
        "global_average",
        "region_stacked",
        "distribution",
    ]
    for cls in registry.all_classes():
        assert cls.label
