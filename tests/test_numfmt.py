from __future__ import annotations

import pytest

from rdm.numfmt import fmt1, round1


@pytest.mark.parametrize("x,expected", [
    (14.25, 14.3),
    (0.25, 0.3),
    (33.25, 33.3),
    (2.0, 2.0),
    (0.0, 0.0),
    # 0.15 is stored just below the half, so it rounds down like toFixed
    (0.15, 0.1),
    (7.04, 7.0),
])
def test_round1(x, expected):
    assert round1(x) == expected


def test_round1_differs_from_builtin_on_ties():
    assert round(14.25, 1) == 14.2
    assert round1(14.25) == 14.3


@pytest.mark.parametrize("x,expected", [
    (14.25, "14.3"),
    (0.0, "0.0"),
    (3, "3.0"),
    (43.8, "43.8"),
])
def test_fmt1(x, expected):
    assert fmt1(x) == expected
