from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        # Filter controls
        COUNTRY_SELECT = "country-select"
        REGION_SELECT = "region-select"
        YEAR_SLIDER = "year-slider"
        YEAR_LABEL = "year-label"
        TOP_N_INPUT = "top-n-input"

        # Sidebar metadata
        SIDEBAR_DATASET_NAME = "sidebar-dataset-name"
        SIDEBAR_DATASET_META = "sidebar-dataset-meta"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        GRAPH = "view-graph"


def graph_id(view_id: str) -> str:
    return f"{IDs.Pattern.GRAPH}-{view_id}"
