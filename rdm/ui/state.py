from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional
import logging
import plotly.graph_objects as go

from rdm.synthetic import DaySeries
from rdm.periods import period_bounds, preview_bounds
from rdm.plots import MAIN_TRACES, timeseries_figure

__all__ = [
    "Controls",
    "DashboardState",
]

logger = logging.getLogger(__name__)


@dataclass
class Controls:
    lang: str
    period: Optional[str]  # None = initial preview window
    seed: Optional[int]
    regenerate: bool = False


@dataclass
class DashboardState:
    """Owns the full generated series and the main line chart built from it."""

    series: DaySeries
    figure: go.Figure = field(default=None)  # type: ignore[assignment]
    tr: Optional[Callable[[str], str]] = None
    period: Optional[str] = None
    window: tuple[int, int] = (0, 0)

    def __post_init__(self):
        if self.figure is None:
            start, end = preview_bounds(len(self.series))
            self.figure = timeseries_figure(self.series.window(start, end), self.tr)
            self.window = (start, end)

    def apply_period(self, period: str) -> None:
        """Re-slice the held series into the existing figure (no regeneration)."""
        start, end = period_bounds(period, len(self.series))
        view = self.series.window(start, end)
        labels = list(view.labels)
        for trace, channel in zip(self.figure.data, MAIN_TRACES):
            trace.x = labels
            trace.y = getattr(view, channel)
        self.period = period
        self.window = (start, end)
        logger.debug("Applied period %s -> [%d, %d)", period, start, end)
