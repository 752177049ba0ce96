from .top_n_view import TopNView
from .trend_view import TrendView
from .most_improved_view import MostImprovedView
from .inequality_view import InequalityView
from .correlation_view import CorrelationView
from .global_average_view import GlobalAverageView
from .region_stacked_view import RegionStackedView
from .distribution_view import DistributionView
from .registry import build_view_registry

__all__ = [
    "TopNView",
    "TrendView",
    "MostImprovedView",
    "InequalityView",
    "CorrelationView",
    "GlobalAverageView",
    "RegionStackedView",
    "DistributionView",
    "build_view_registry",
]
