"""Synthetic daily rainfall with three competing model estimates.

Model per day index i (0-based), all draws uniform on [0, 1):

    season(i) = 1 + 0.6 * sin(2*pi * (i mod 365) / 365)
    rain      = U0 < 0.3 * season(i)
    actual    = (U1 + U2) * 8 * season(i)   if rain else 0
                (x3 when U3 > 0.95, extreme event)
    lr        = max(0, (0.6*actual + 2 if rain else 1) + (U4 - 0.5) * 3)
    rf        = max(0, 0.9*actual + (U5 - 0.5) * 5)  if rain else 0
    ensemble  = 0.4 * lr + 0.6 * rf

Actual, lr and rf are rounded to one decimal, halves up (rdm.numfmt); the
ensemble is blended from the rounded lr/rf and rounded again, so it is
reproducible from the stored values.
Every day consumes one row of six uniforms, drawn in a single block from the
random source; there is no state carried between days.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np
import pandas as pd

from .i18n import DEFAULT_LANG, format_day_label
from .numfmt import round1

__all__ = [
    "EPOCH",
    "SEASON_PERIOD",
    "ENSEMBLE_WEIGHTS",
    "DaySeries",
    "get_rng",
    "season_multiplier",
    "generate",
]

logger = logging.getLogger(__name__)

EPOCH = pd.Timestamp("2024-01-01")
SEASON_PERIOD = 365
SEASON_AMPLITUDE = 0.6
BASE_RAIN_PROB = 0.3
RAIN_SCALE = 8.0
EXTREME_THRESHOLD = 0.95
EXTREME_FACTOR = 3.0
LR_SLOPE, LR_INTERCEPT, LR_DRY_VALUE, LR_NOISE = 0.6, 2.0, 1.0, 3.0
RF_SLOPE, RF_NOISE = 0.9, 5.0
ENSEMBLE_WEIGHTS = (0.4, 0.6)  # (lr, rf)

_DRAWS_PER_DAY = 6

RandomSource = Union[np.random.Generator, int, None]


@dataclass(frozen=True, eq=False)
class DaySeries:
    """Aligned daily channels; each holds a read-only copy of the arrays passed in."""

    dates: pd.DatetimeIndex
    labels: tuple[str, ...]
    actual: np.ndarray
    lr: np.ndarray
    rf: np.ndarray
    ensemble: np.ndarray

    def __post_init__(self):
        n = len(self.labels)
        for name in ("dates", "actual", "lr", "rf", "ensemble"):
            if len(getattr(self, name)) != n:
                raise ValueError(f"Channel {name!r} has length {len(getattr(self, name))}, expected {n}")
        for name in ("actual", "lr", "rf", "ensemble"):
            arr = np.array(getattr(self, name), dtype=float)
            arr.flags.writeable = False
            object.__setattr__(self, name, arr)

    def __len__(self) -> int:
        return len(self.labels)

    def window(self, start: int, end: int) -> "DaySeries":
        """Contiguous sub-series over index range [start, end) (Python slice semantics)."""
        sl = slice(start, end)
        return DaySeries(
            dates=self.dates[sl],
            labels=self.labels[sl],
            actual=self.actual[sl],
            lr=self.lr[sl],
            rf=self.rf[sl],
            ensemble=self.ensemble[sl],
        )

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "date": self.dates,
            "label": list(self.labels),
            "actual": self.actual,
            "lr": self.lr,
            "rf": self.rf,
            "ensemble": self.ensemble,
        })


def get_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return a Generator; ints seed a new one, None draws fresh OS entropy.

    Any other object is used as-is and only needs a ``random(size)`` method.
    """
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


def season_multiplier(i):
    """Seasonal factor for day index ``i`` (scalar or array), exactly 365-periodic."""
    phase = np.mod(np.asarray(i), SEASON_PERIOD)
    out = 1.0 + SEASON_AMPLITUDE * np.sin(2 * np.pi * phase / SEASON_PERIOD)
    if out.ndim == 0:
        return float(out)
    return out


def _round1(values: np.ndarray) -> np.ndarray:
    return np.array([round1(v) for v in values], dtype=float)


def generate(days: int, rng: RandomSource = None, lang: str = DEFAULT_LANG) -> DaySeries:
    """Generate ``days`` days of synthetic rainfall starting at 2024-01-01.

    Parameters
    ----------
    days : int
        Series length; values <= 0 give an empty series.
    rng : Generator | int | None
        Random source. Pass a seed or Generator for reproducible output.
    lang : str
        Language for the day/month labels (see ``rdm.i18n``).
    """
    n = max(0, int(days))
    gen = get_rng(rng)

    idx = np.arange(n)
    season = season_multiplier(idx)
    u = np.asarray(gen.random((n, _DRAWS_PER_DAY)), dtype=float).reshape(n, _DRAWS_PER_DAY)

    is_rain = u[:, 0] < BASE_RAIN_PROB * season

    actual = np.where(is_rain, (u[:, 1] + u[:, 2]) * RAIN_SCALE * season, 0.0)
    extreme = is_rain & (u[:, 3] > EXTREME_THRESHOLD)
    actual = np.where(extreme, actual * EXTREME_FACTOR, actual)

    lr = np.where(is_rain, actual * LR_SLOPE + LR_INTERCEPT, LR_DRY_VALUE)
    lr = np.maximum(0.0, lr + (u[:, 4] - 0.5) * LR_NOISE)

    rf = np.where(is_rain, actual * RF_SLOPE + (u[:, 5] - 0.5) * RF_NOISE, 0.0)
    rf = np.maximum(0.0, rf)

    actual = _round1(actual)
    lr = _round1(lr)
    rf = _round1(rf)
    w_lr, w_rf = ENSEMBLE_WEIGHTS
    ensemble = _round1(w_lr * lr + w_rf * rf)

    dates = pd.date_range(EPOCH, periods=n, freq="D")
    labels = tuple(format_day_label(d, lang) for d in dates)

    logger.debug("Generated %d days (%d rain, %d extreme)", n, int(is_rain.sum()), int(extreme.sum()))
    return DaySeries(dates=dates, labels=labels, actual=actual, lr=lr, rf=rf, ensemble=ensemble)
