from __future__ import annotations

import numpy as np

from rdm.i18n import Translator
from rdm.synthetic import generate
from rdm.ui.state import DashboardState


def test_initial_figure_shows_preview_window():
    s = generate(365, rng=21)
    state = DashboardState(series=s)
    assert state.window == (0, 100)
    assert [t.name for t in state.figure.data] == ["actual_name", "ensemble_name", "rf_name"]
    assert len(state.figure.data[0].x) == 100
    assert state.figure.data[2].visible == "legendonly"


def test_short_series_preview():
    state = DashboardState(series=generate(30, rng=21))
    assert state.window == (0, 30)
    assert len(state.figure.data[1].y) == 30


def test_apply_period_mutates_owned_figure():
    s = generate(365, rng=21)
    state = DashboardState(series=s, tr=Translator("en"))
    fig = state.figure
    state.apply_period("dry")
    assert state.figure is fig
    assert state.period == "dry"
    assert state.window == (150, 240)
    assert list(fig.data[0].x) == list(s.labels[150:240])
    assert np.array_equal(np.asarray(fig.data[0].y), s.actual[150:240])
    assert np.array_equal(np.asarray(fig.data[1].y), s.ensemble[150:240])
    assert np.array_equal(np.asarray(fig.data[2].y), s.rf[150:240])
    assert fig.data[0].name == "Actual"


def test_apply_period_all_and_wet():
    s = generate(400, rng=2)
    state = DashboardState(series=s)
    state.apply_period("all")
    assert len(state.figure.data[0].x) == 365
    state.apply_period("wet")
    assert len(state.figure.data[2].y) == 90
