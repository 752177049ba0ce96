"""
Core domain layer: record normalisation, dataset abstraction, filter state,
view base class, view registry and the recomputation driver
"""

from .record import Record, YEARS, normalize_row
from .dataset import Dataset
from .filter_state import FilterState, FilterProfile
from .base_view import BaseView
from .view_registry import ViewRegistry
from .pipeline import recompute

__all__ = [
    "Record",
    "YEARS",
    "normalize_row",
    "Dataset",
    "FilterState",
    "FilterProfile",
    "BaseView",
    "ViewRegistry",
    "recompute",
]
