from __future__ import annotations
import streamlit as st
from typing import Callable, Optional
from rdm.ews import compute_slider_values, format_slider_values

__all__ = ["render_ews"]


def render_ews(slider_max: int, slider_default: int, tr: Optional[Callable[[str], str]] = None):
    """Slider plus three live model outputs; Streamlit reruns on every change."""
    tr = tr or (lambda k, **_: k)
    st.subheader(tr("ews_header"))
    v = st.slider(tr("slider_label"), 0, int(slider_max), int(slider_default), 1, key="rain_slider")
    lr, rf, ens = format_slider_values(compute_slider_values(v))
    c1, c2, c3 = st.columns(3)
    c1.metric(tr("lr_name"), lr)
    c2.metric(tr("rf_name"), rf)
    c3.metric(tr("ensemble_name"), ens)
    st.caption(tr("slider_caption", v=v))
