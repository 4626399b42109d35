from __future__ import annotations
import streamlit as st
from .state import Controls
from rdm.config import Settings
from rdm.i18n import Translator

__all__ = ["build_controls", "PERIOD_CHOICES"]

# Internal period codes in display order; None keeps the initial preview window.
PERIOD_CHOICES = [None, "wet", "dry", "all"]


def build_controls(settings: Settings, lang: str) -> Controls:
    tr = Translator(lang)
    st.sidebar.header(tr("controls"))
    period = st.sidebar.radio(
        tr("period_label"),
        PERIOD_CHOICES,
        index=0,
        format_func=lambda p: tr(f"period_{p or 'initial'}"),
        key="period",
    )
    seed_raw = st.sidebar.text_input(
        tr("seed_label"),
        value="" if settings.seed is None else str(settings.seed),
        key="seed",
    )
    seed = None
    if seed_raw.strip():
        try:
            seed = int(seed_raw.strip())
        except ValueError:
            st.sidebar.warning(tr("seed_invalid", raw=seed_raw))
    regenerate = st.sidebar.button(tr("regenerate"), key="regenerate")

    return Controls(
        lang=lang,
        period=period,
        seed=seed,
        regenerate=bool(regenerate),
    )
