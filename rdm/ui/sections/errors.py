from __future__ import annotations
import streamlit as st
from typing import Callable, Optional
from rdm.metrics import CANNED_ERRORS, error_table
from rdm.plots import error_comparison_figure
from rdm.ui.display import show_plot
from rdm.synthetic import DaySeries

__all__ = ["render_errors"]


def render_errors(series: DaySeries, tr: Optional[Callable[[str], str]] = None):
    tr = tr or (lambda k, **_: k)
    show_plot(error_comparison_figure(CANNED_ERRORS, tr))
    with st.expander(tr("error_table_caption"), expanded=False):
        table = error_table(series)
        if table.empty:
            st.info(tr("no_data"))
            return
        table.index = [tr(f"{m}_name") for m in table.index]
        st.dataframe(table.round(3))
