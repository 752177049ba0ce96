from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import pandas as pd
import plotly.colors
import plotly.graph_objs as go

from .dataset import Dataset
from .filter_state import DEFAULT_TOP_N, FilterProfile, FilterState
from .record import Record
from .view_model import ViewModel

logger = logging.getLogger(__name__)

PALETTE: List[str] = list(plotly.colors.qualitative.Plotly)


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - derive the view model for the current FilterState.
      Must be pure: no mutation of the Dataset or the state, no randomness
    - implement 'render_figure' - used to render the view model using Plotly
    """

    id: str = None
    label: str = None
    filter_profile = FilterProfile()

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    @abstractmethod
    def compute_data(self, state: FilterState) -> ViewModel:
        """
        Compute the view model given the current FilterState
        :param state: the current FilterState - what filters the user has toggled for
        :return: a ChartData or ScatterData for this chart
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: ViewModel, state: FilterState) -> go.Figure:
        """
        Render the figure given the computed view model
        :param data: the view model provided by {@link compute_data()}
        :param state: the current FilterState
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    def timed_compute(self, state: FilterState) -> ViewModel:
        """compute_data() with its duration logged."""
        start = time.perf_counter()
        data = self.compute_data(state)
        logger.debug(
            "view_computed",
            extra={
                "view_id": self.id,
                "elapsed_ms": round((time.perf_counter() - start) * 1000.0, 3),
            },
        )
        return data

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def filtered_records(self, state: FilterState) -> List[Record]:
        """
        Records left after the state's region filter.

        All views should call this (or filtered_frame) instead of filtering
        by region themselves, so the behaviour lives in one place.
        """
        return self.dataset.subset_for_state(state)

    def filtered_frame(self, state: FilterState) -> pd.DataFrame:
        return self.dataset.frame_for_state(state)

    def resolve_year(self, state: FilterState) -> Optional[str]:
        """The state's year if it is a known year label, else the latest year with data."""
        year = getattr(state, "year", None)
        if year is not None and str(year) in self.dataset.years:
            return str(year)
        return self.dataset.latest_year()

    @staticmethod
    def resolve_top_n(state: FilterState) -> int:
        top_n = getattr(state, "top_n", None)
        if isinstance(top_n, bool):
            return DEFAULT_TOP_N
        try:
            top_n = int(top_n)
        except (TypeError, ValueError):
            return DEFAULT_TOP_N
        return top_n if top_n > 0 else DEFAULT_TOP_N

    @staticmethod
    def values_or_zero(df: pd.DataFrame, year: Optional[str]) -> pd.Series:
        """Year column with missing measurements as 0; all zeros for an unknown year."""
        if year is None or year not in df.columns:
            return pd.Series(0.0, index=df.index, dtype=float)
        return df[year].fillna(0.0).astype(float)

    @staticmethod
    def colour(index: int) -> str:
        """Deterministic series colour, cycling the Plotly qualitative palette."""
        return PALETTE[index % len(PALETTE)]

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
