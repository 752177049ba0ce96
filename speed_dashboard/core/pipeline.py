from __future__ import annotations

import logging
import time
from typing import Dict, Optional, Sequence

from .dataset import Dataset
from .filter_state import FilterState
from .view_model import ViewModel
from .view_registry import ViewRegistry

logger = logging.getLogger(__name__)


def recompute(
    dataset: Dataset,
    state: FilterState,
    registry: ViewRegistry,
    view_ids: Optional[Sequence[str]] = None,
) -> Dict[str, ViewModel]:
    """
    Re-run every enabled view for one filter change.

    Views run sequentially in `view_ids` order (registry order by default).
    Each pass starts from scratch; nothing is carried over between calls.

    Raises:
        KeyError: if a view id is not registered
    """
    start = time.perf_counter()
    ids = list(view_ids) if view_ids is not None else registry.ids()

    results: Dict[str, ViewModel] = {}
    for view_id in ids:
        view = registry.create(view_id, dataset)
        results[view_id] = view.timed_compute(state)

    logger.info(
        "recompute",
        extra={
            "dataset": dataset.name,
            "n_views": len(results),
            "region": state.region,
            "year": state.year,
            "n_countries": len(state.countries),
            "elapsed_ms": round((time.perf_counter() - start) * 1000.0, 3),
        },
    )
    return results
