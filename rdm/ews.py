"""Early-warning slider: fixed linear responses of each model to an input rainfall.

    lr       = 0.7 * v + 2
    rf       = 0.95 * v
    ensemble = 0.35 * lr + 0.65 * rf

Independent of the generated series; recomputed on every slider change.
"""
from __future__ import annotations

from typing import NamedTuple

from .numfmt import fmt1, round1

__all__ = ["SliderValues", "compute_slider_values", "format_slider_values"]

LR_SLOPE, LR_INTERCEPT = 0.7, 2.0
RF_SLOPE = 0.95
ENSEMBLE_WEIGHTS = (0.35, 0.65)  # (lr, rf)


class SliderValues(NamedTuple):
    lr: float
    rf: float
    ensemble: float


def compute_slider_values(v: float) -> SliderValues:
    """Pure function of the slider value; each output rounded to one decimal, halves up.

    >>> compute_slider_values(50)
    SliderValues(lr=37.0, rf=47.5, ensemble=43.8)
    """
    v = float(v)
    lr = v * LR_SLOPE + LR_INTERCEPT
    rf = v * RF_SLOPE
    w_lr, w_rf = ENSEMBLE_WEIGHTS
    ens = w_lr * lr + w_rf * rf
    return SliderValues(round1(lr), round1(rf), round1(ens))


def format_slider_values(values: SliderValues) -> tuple[str, str, str]:
    return tuple(fmt1(x) for x in values)  # type: ignore[return-value]
