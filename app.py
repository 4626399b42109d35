"""Streamlit orchestrator for the synthetic rainfall dashboard.

Responsibilities are delegated to modules under `rdm` / `rdm.ui`:

  rdm.config.load_settings        -> environment-driven settings
  rdm.ui.controls.build_controls  -> sidebar inputs (period, seed, regenerate)
  rdm.ui.data.load_series         -> generate once per session, reuse on reruns
  rdm.ui.state.DashboardState     -> owns the series and the main chart
  rdm.ui.sections.*               -> individual visualization sections

The goal is to keep this file thin: sequencing, light session state, and high
level layout only.

Run: streamlit run app.py
"""
from __future__ import annotations

import logging
import streamlit as st

from rdm.config import load_settings
from rdm.i18n import Translator, TRANSLATIONS, LANG_CODES
from rdm.ui.controls import build_controls
from rdm.ui.data import load_series
from rdm.ui.state import Controls, DashboardState
from rdm.ui.sections import render_timeseries, render_errors, render_scatter, render_ews


st.set_page_config(page_title="Rainfall Prediction Dashboard", layout="wide")

try:
    settings = load_settings()
except ValueError as exc:
    st.error(str(exc))
    st.stop()

logging.basicConfig(level=getattr(logging, settings.log_level))

# --- Language handling with st.query_params (?lang=id|en) ---
qp = st.query_params
initial_lang = qp.get("lang", settings.lang)
if initial_lang not in TRANSLATIONS:
    initial_lang = settings.lang

lang_display = [TRANSLATIONS[code][f"lang_{code}"] for code in LANG_CODES]
display_to_code = dict(zip(lang_display, LANG_CODES))
selected_display = st.sidebar.selectbox(
    TRANSLATIONS[initial_lang]["language_label"], lang_display, index=LANG_CODES.index(initial_lang)
)
lang = display_to_code[selected_display]
if qp.get("lang", initial_lang) != lang:
    qp["lang"] = lang
tr = Translator(lang)

st.title(tr("app_title"))
st.caption(tr("tagline"))

controls: Controls = build_controls(settings, lang)

with st.spinner(tr("generating_data")):
    series = load_series(settings.days, controls)

state = DashboardState(series=series, tr=tr)
if controls.period is not None:
    state.apply_period(controls.period)

render_timeseries(state, tr)

col1, col2 = st.columns(2)
with col1:
    render_errors(series, tr)
with col2:
    render_scatter(series, tr)

render_ews(settings.slider_max, settings.slider_default, tr)

st.caption(tr("footer_caption"))
