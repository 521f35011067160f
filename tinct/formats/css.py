# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
CSS-style color strings.

Numbers are printed in their shortest round-trip form, never in
exponent notation, with a trailing ``.0`` dropped::

    rgba(0, 137, 255, 1)
    rgba(255, 0, 0, 0.5)
    hsla(208, 100%, 50%, 1)

Percentages follow a lenient rule: values up to 1 are fractions and are
scaled by 100; values above 1 are taken as percentages already.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from tinct.convert.numbers import to_decimal
from tinct.formats.base import CSSFormat
from tinct.schema import Color


def format_number(n: Union[int, float]) -> str:
    """
    Print a number the way CSS consumers expect.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(1e-07)
        '0.0000001'
    """
    if isinstance(n, int):
        return str(n)
    return np.format_float_positional(float(n), trim="-")


def to_pct(n: float) -> str:
    """Format a fraction (or an already-scaled percentage) with a ``%``."""
    if n <= 1.0:
        pct = n * 100.0
    else:
        pct = n
    return f"{format_number(pct)}%"


def to_rgba_string(color: Color) -> str:
    """
    Format a Color as ``rgba(r, g, b, a)``.

    Example::

        >>> to_rgba_string(Color(255, 0, 0, 0.5))
        'rgba(255, 0, 0, 0.5)'
    """
    return (
        f"rgba({color.r}, {color.g}, {color.b}, "
        f"{format_number(color.a)})"
    )


def to_hsla_string(color: Color) -> str:
    """
    Format a Color as ``hsla(h, s%, l%, a)``.

    Uses the rounded HSLA view, so saturation and lightness carry at most
    two decimal places before scaling.

    Example::

        >>> to_hsla_string(Color(255, 0, 0, 0.5))
        'hsla(0, 100%, 50%, 0.5)'
    """
    hsla = color.hsla()
    return (
        f"hsla({format_number(hsla.h)}, {to_pct(hsla.s)}, "
        f"{to_pct(hsla.l)}, {format_number(to_decimal(hsla.a))})"
    )


def to_css(
    color: Color,
    *,
    format: Union[CSSFormat, str] = CSSFormat.HEX,
) -> str:
    """Format a Color in one of the CSS textual forms.

    Args:
        color: The Color to format.
        format: CSSFormat member or its value ("hex", "rgba", "hsla").

    Returns:
        CSS color string.

    Raises:
        ValueError: If ``format`` names no known CSS form.
    """
    format = CSSFormat(format)
    if format == CSSFormat.HEX:
        return color.hex
    elif format == CSSFormat.RGBA:
        return to_rgba_string(color)
    else:
        return to_hsla_string(color)
