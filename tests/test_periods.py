from __future__ import annotations

import pytest

from rdm.periods import period_bounds, preview_bounds, scatter_points, slice_period
from rdm.synthetic import generate


@pytest.mark.parametrize("period,expected", [
    ("wet", (0, 90)),
    ("dry", (150, 240)),
    ("all", (0, 365)),
    ("monsoon", (0, 365)),
])
def test_period_bounds_full_year(period, expected):
    assert period_bounds(period, 365) == expected


def test_period_bounds_clip_to_series_length():
    assert period_bounds("all", 500) == (0, 365)
    assert period_bounds("all", 200) == (0, 200)
    assert period_bounds("dry", 200) == (150, 200)
    assert period_bounds("dry", 100) == (100, 100)
    assert period_bounds("wet", 0) == (0, 0)


def test_preview_bounds():
    assert preview_bounds(365) == (0, 100)
    assert preview_bounds(40) == (0, 40)


def test_slice_period_reuses_series():
    s = generate(365, rng=4)
    dry = slice_period(s, "dry")
    assert len(dry) == 90
    assert dry.labels[0] == s.labels[150]
    assert dry.actual[-1] == s.actual[239]


def test_scatter_points_every_third_index():
    s = generate(10, rng=4)
    pts = scatter_points(s)
    assert pts["index"].tolist() == [0, 3, 6, 9]
    assert pts["actual"].tolist() == [s.actual[i] for i in (0, 3, 6, 9)]
    assert pts["ensemble"].tolist() == [s.ensemble[i] for i in (0, 3, 6, 9)]


def test_scatter_points_full_year_and_empty():
    assert len(scatter_points(generate(365, rng=1))) == 122
    assert scatter_points(generate(0, rng=1)).empty
