from __future__ import annotations
import logging
import streamlit as st
from .state import Controls
from rdm.synthetic import DaySeries, generate

__all__ = ["load_series"]

logger = logging.getLogger(__name__)

_SERIES_KEY = "series"
_SERIES_ARGS_KEY = "series_args"


def load_series(days: int, ctr: Controls) -> DaySeries:
    """Generate once per session; reruns reuse the stored series.

    A new series is generated on first load, on explicit regenerate, or when
    the seed, length or label language changes.
    """
    args = (int(days), ctr.seed, ctr.lang)
    stored = st.session_state.get(_SERIES_KEY)
    if stored is not None and not ctr.regenerate and st.session_state.get(_SERIES_ARGS_KEY) == args:
        return stored
    series = generate(days, rng=ctr.seed, lang=ctr.lang)
    st.session_state[_SERIES_KEY] = series
    st.session_state[_SERIES_ARGS_KEY] = args
    logger.info("Generated series: days=%d seed=%s lang=%s", len(series), ctr.seed, ctr.lang)
    return series
