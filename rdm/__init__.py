"""Rainfall Demo Model (rdm) package.

Synthetic daily rainfall with three competing model estimates, plus the
helpers the Streamlit dashboard renders from.

Modules:
  synthetic: seasonal zero-inflated rainfall generator (DaySeries)
  periods: season windows, preview slice, scatter down-sampling
  ews: early-warning slider formula
  metrics: canned and computed model errors
  plots: interactive Plotly figures
  i18n: UI strings and date labels (id, en)
  config: environment-driven settings
  cli: CSV export entry point
"""

from . import synthetic, periods, ews, metrics, plots, i18n, config  # noqa: F401
from .synthetic import DaySeries, generate  # noqa: F401
from .ews import compute_slider_values  # noqa: F401

__all__ = [
    "synthetic",
    "periods",
    "ews",
    "metrics",
    "plots",
    "i18n",
    "config",
    "DaySeries",
    "generate",
    "compute_slider_values",
]
