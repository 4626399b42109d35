from __future__ import annotations
import streamlit as st
from typing import Callable, Optional
from rdm.ui.display import show_plot
from rdm.ui.state import DashboardState

__all__ = ["render_timeseries"]


def render_timeseries(state: DashboardState, tr: Optional[Callable[[str], str]] = None):
    tr = tr or (lambda k, **_: k)
    series = state.series
    if len(series) == 0:
        st.info(tr("no_data"))
        return
    col1, col2 = st.columns([3, 1])
    with col1:
        show_plot(state.figure)
    with col2:
        st.metric(tr("summary_days"), f"{len(series)}")
        st.metric(tr("summary_nonzero_days"), f"{int((series.actual > 0).sum())}")
        st.metric(tr("summary_max"), f"{float(series.actual.max()):.1f}")
        csv_bytes = series.to_frame().to_csv(index=False).encode("utf-8")
        st.download_button(tr("download_csv"), csv_bytes, file_name="synthetic_rainfall.csv", mime="text/csv")
