from __future__ import annotations
import streamlit as st
from typing import Callable, Optional
from rdm.periods import scatter_points
from rdm.plots import scatter_figure
from rdm.ui.display import show_plot
from rdm.synthetic import DaySeries

__all__ = ["render_scatter"]


def render_scatter(series: DaySeries, tr: Optional[Callable[[str], str]] = None):
    tr = tr or (lambda k, **_: k)
    points = scatter_points(series)
    if points.empty:
        st.info(tr("no_data"))
        return
    show_plot(scatter_figure(points, tr))
