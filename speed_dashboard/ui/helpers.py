from __future__ import annotations

from typing import Dict, List, Tuple

from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.filter_state import ALL_REGIONS, FilterProfile


def get_filter_dropdown_options(dataset: Dataset) -> Tuple[List[dict], List[dict]]:
    country_options = [{"label": c, "value": c} for c in dataset.all_countries()]

    # "All" first, then the dataset's regions
    region_options = [{"label": ALL_REGIONS, "value": ALL_REGIONS}]
    region_options += [{"label": r, "value": r} for r in dataset.all_regions() if r]

    return country_options, region_options


def year_slider_marks(dataset: Dataset) -> Dict[int, str]:
    """Slider positions are indexes into dataset.years."""
    return {i: y for i, y in enumerate(dataset.years)}


def dataset_summary(dataset: Dataset) -> str:
    n_regions = len([r for r in dataset.all_regions() if r])
    return f"{len(dataset)} countries · {n_regions} regions · {len(dataset.years)} years"


def profile_hint(profile: FilterProfile) -> str:
    """Short caption naming the controls a view reacts to."""
    names = [
        label
        for flag, label in (
            (profile.countries, "countries"),
            (profile.region, "region"),
            (profile.year, "year"),
            (profile.top_n, "top N"),
        )
        if flag
    ]
    return f"Filters: {', '.join(names)}" if names else "Filters: none"
