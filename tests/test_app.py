from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from rdm.i18n import Translator

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("RDM_SEED", "42")
    monkeypatch.delenv("RDM_DAYS", raising=False)
    monkeypatch.delenv("RDM_SLIDER_DEFAULT", raising=False)
    monkeypatch.delenv("RDM_LANG", raising=False)
    return AppTest.from_file(APP_PATH, default_timeout=60)


def test_app_renders(app):
    app.run()
    assert not app.exception
    values = [m.value for m in app.metric]
    assert "365" in values
    # early-warning outputs at the default slider value of 50
    assert values[-3:] == ["37.0", "47.5", "43.8"]


def test_slider_recomputes(app):
    app.run()
    app.slider(key="rain_slider").set_value(10).run()
    assert not app.exception
    assert [m.value for m in app.metric][-3:] == ["9.0", "9.5", "9.3"]


def test_series_kept_across_reruns(app):
    app.run()
    first = app.session_state["series"]
    app.slider(key="rain_slider").set_value(20).run()
    assert app.session_state["series"] is first


def test_invalid_seed_warning_is_localized(app):
    app.run()
    app.text_input(key="seed").set_value("abc").run()
    assert not app.exception
    assert [w.value for w in app.warning] == [Translator("id")("seed_invalid", raw="abc")]


def test_rain_day_metric_counts_nonzero_days(app):
    app.run()
    labels = [m.label for m in app.metric]
    assert Translator("id")("summary_nonzero_days") in labels
