from __future__ import annotations

import numpy as np
import pandas as pd

from .synthetic import DaySeries

__all__ = ["CANNED_ERRORS", "MODEL_KEYS", "error_table"]

# Reference RMSE (mm) per model shown in the comparison chart.
CANNED_ERRORS = {
    "persistence": 5.8,
    "lr": 4.12,
    "rf": 3.85,
    "ensemble": 3.42,
}
MODEL_KEYS = list(CANNED_ERRORS)


def error_table(series: DaySeries) -> pd.DataFrame:
    """MAE and RMSE of each estimate against ``actual``.

    Persistence predicts yesterday's actual, so it is scored from day 1 onward.
    Returns DataFrame indexed by model (persistence, lr, rf, ensemble) with
    columns: mae, rmse, n. Empty series -> empty frame with the same columns.
    """
    if len(series) == 0:
        return pd.DataFrame(columns=["mae", "rmse", "n"], index=pd.Index([], name="model"))
    actual = np.asarray(series.actual, dtype=float)
    pairs = {
        "persistence": (actual[1:], actual[:-1]),
        "lr": (actual, np.asarray(series.lr, dtype=float)),
        "rf": (actual, np.asarray(series.rf, dtype=float)),
        "ensemble": (actual, np.asarray(series.ensemble, dtype=float)),
    }
    rows = []
    for model, (obs, est) in pairs.items():
        if obs.size == 0:
            rows.append({"model": model, "mae": float("nan"), "rmse": float("nan"), "n": 0})
            continue
        err = est - obs
        rows.append({
            "model": model,
            "mae": float(np.mean(np.abs(err))),
            "rmse": float(np.sqrt(np.mean(err ** 2))),
            "n": int(obs.size),
        })
    return pd.DataFrame(rows).set_index("model")
