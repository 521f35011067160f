# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Numeric helpers shared by the conversions.

Rounding here is half-away-from-zero (not Python's banker's rounding),
so 0.5 → 1 and -0.5 → -1.
"""

from __future__ import annotations

import math


def _round_half_away(n: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    f = math.floor(n)
    # n - floor(n) is exact for every finite float
    frac = n - f
    if frac > 0.5 or (frac == 0.5 and n > 0):
        f += 1
    return float(f)


def round_to(n: float, digits: int = 0) -> float:
    """
    Round ``n`` to ``digits`` decimal places.

    Scales by ``10 ** digits``, rounds half away from zero, then scales
    back. NaN and infinities are returned unchanged.

    Examples:
        >>> round_to(207.76, 0)
        208.0
        >>> round_to(0.50196, 2)
        0.5
    """
    if not math.isfinite(n):
        return n
    places = 10.0 ** digits
    return _round_half_away(n * places) / places


def to_decimal(n: float) -> float:
    """Treat values above 1 as percentages; pass [0, 1] values through."""
    if n > 1.0:
        return n / 100.0
    return n
