"""One-decimal rounding that rounds exact halves up, like JavaScript ``toFixed(1)``.

Python's ``round(x, 1)`` and ``f"{x:.1f}"`` round exact ties to even
(``round(14.25, 1) == 14.2``); dashboard values must read 14.3.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

__all__ = ["round1", "fmt1"]

_TENTH = Decimal("0.1")


def round1(x: float) -> float:
    """Round the exact binary value of ``x`` to one decimal, halves away from zero."""
    return float(Decimal(float(x)).quantize(_TENTH, rounding=ROUND_HALF_UP))


def fmt1(x: float) -> str:
    return str(Decimal(float(x)).quantize(_TENTH, rounding=ROUND_HALF_UP))
