from __future__ import annotations

import pandas as pd
import pytest

from rdm.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("RDM_DAYS", "RDM_SEED", "RDM_LANG", "RDM_LOG_LEVEL", "RDM_SLIDER_MAX", "RDM_SLIDER_DEFAULT"):
        monkeypatch.delenv(name, raising=False)


def test_export_csv(tmp_path):
    out = tmp_path / "nested" / "series.csv"
    main(["--days", "30", "--seed", "1", "--out", str(out)])
    df = pd.read_csv(out)
    assert len(df) == 30
    assert list(df.columns) == ["date", "label", "actual", "lr", "rf", "ensemble"]
    assert (df["actual"] >= 0).all()


def test_export_is_reproducible(tmp_path):
    a, b = tmp_path / "a.csv", tmp_path / "b.csv"
    main(["--days", "60", "--seed", "8", "--out", str(a)])
    main(["--days", "60", "--seed", "8", "--out", str(b)])
    assert a.read_text() == b.read_text()


def test_export_period(tmp_path):
    out = tmp_path / "dry.csv"
    main(["--seed", "3", "--period", "dry", "--lang", "en", "--out", str(out)])
    df = pd.read_csv(out)
    assert len(df) == 90
    assert df["label"].iloc[0] == "May 30"


def test_summary_without_out(capsys):
    main(["--days", "20", "--seed", "2"])
    printed = capsys.readouterr().out
    assert "Generated 20 days" in printed
    assert "ensemble" in printed


def test_env_default_days(monkeypatch, capsys):
    monkeypatch.setenv("RDM_DAYS", "12")
    main(["--seed", "2"])
    assert "Generated 12 days" in capsys.readouterr().out
