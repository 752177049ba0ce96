from __future__ import annotations

from speed_dashboard.core.view_registry import ViewRegistry


def build_view_registry() -> ViewRegistry:
    """Registry of every chart view, in display order."""
    from speed_dashboard.views import (
        TopNView,
        TrendView,
        MostImprovedView,
        InequalityView,
        CorrelationView,
        GlobalAverageView,
        RegionStackedView,
        DistributionView,
    )

    registry = ViewRegistry()
    registry.register(TopNView)
    registry.register(TrendView)
    registry.register(MostImprovedView)
    registry.register(InequalityView)
    registry.register(CorrelationView)
    registry.register(GlobalAverageView)
    registry.register(RegionStackedView)
    registry.register(DistributionView)
    return registry
