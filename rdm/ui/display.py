from __future__ import annotations
import streamlit as st

__all__ = ["PLOT_CONFIG", "show_plot"]

PLOT_CONFIG = {"displaylogo": False, "modeBarButtonsToRemove": ["select2d", "lasso2d"]}


# Unified Plotly display helper shared by all sections
def show_plot(fig):
    if fig is None:
        return
    st.plotly_chart(fig, config=PLOT_CONFIG)
