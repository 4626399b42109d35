from __future__ import annotations

import logging
from typing import Tuple

import pandas as pd

from .synthetic import DaySeries

__all__ = [
    "PERIODS",
    "PREVIEW_DAYS",
    "FULL_YEAR_DAYS",
    "SCATTER_STEP",
    "period_bounds",
    "preview_bounds",
    "slice_period",
    "scatter_points",
]

logger = logging.getLogger(__name__)

# Named season windows as [start, end) day indices.
PERIODS = {
    "wet": (0, 90),
    "dry": (150, 240),
}
PREVIEW_DAYS = 100
FULL_YEAR_DAYS = 365
SCATTER_STEP = 3


def period_bounds(period: str, n_days: int) -> Tuple[int, int]:
    """Return [start, end) for ``period`` clipped to a series of ``n_days``.

    "wet" and "dry" map to fixed windows; "all" and anything unrecognised map to
    the full year, or the whole series when it is shorter than a year.
    """
    n = max(0, int(n_days))
    if period in PERIODS:
        start, end = PERIODS[period]
    else:
        if period != "all":
            logger.debug("Unknown period %r, showing full year", period)
        start, end = 0, FULL_YEAR_DAYS
    return min(start, n), min(end, n)


def preview_bounds(n_days: int) -> Tuple[int, int]:
    return 0, min(PREVIEW_DAYS, max(0, int(n_days)))


def slice_period(series: DaySeries, period: str) -> DaySeries:
    start, end = period_bounds(period, len(series))
    return series.window(start, end)


def scatter_points(series: DaySeries, step: int = SCATTER_STEP) -> pd.DataFrame:
    """(actual, ensemble) pairs at indices 0, step, 2*step, ... < N.

    Returns DataFrame with columns: index, actual, ensemble.
    """
    if step < 1:
        raise ValueError("step must be >= 1")
    idx = list(range(0, len(series), step))
    return pd.DataFrame({
        "index": idx,
        "actual": series.actual[::step],
        "ensemble": series.ensemble[::step],
    })
