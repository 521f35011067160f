# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Supported: RGB ↔ HSL(A), RGB → YIQ

References:
- HSL: https://www.w3.org/TR/css-color-3/#hsl-color
- YIQ: https://en.wikipedia.org/wiki/YIQ

All conversions are pure float arithmetic, evaluated in a fixed order
so results are reproducible to the last bit.
"""

from __future__ import annotations

import math

from tinct.convert.numbers import round_to, to_decimal


RGB_MAX = 255.0

# Luma at or above this counts as a light color
LIGHT_LUMA_THRESHOLD = 128.0

# Decimal places kept in the HSLA view
HUE_DIGITS = 0
SL_DIGITS = 2


# =============================================================================
# RGB → YIQ
# =============================================================================


def rgb_to_yiq(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert byte RGB to YIQ (luma, in-phase, quadrature).

    No rounding is applied.

    Returns:
        Tuple of (y, i, q); y is in [0, 255] for byte input
    """
    r = float(r)
    g = float(g)
    b = float(b)

    y = (0.299 * r) + (0.587 * g) + (0.114 * b)
    i = (0.596 * r) + (-0.274 * g) + (-0.322 * b)
    q = (0.211 * r) + (-0.523 * g) + (0.312 * b)
    return y, i, q


def is_light_luma(y: float) -> bool:
    """True if a YIQ luma value reads as a light color."""
    return y >= LIGHT_LUMA_THRESHOLD


# =============================================================================
# RGB → HSLA
# =============================================================================


def rgb_to_hsla(
    r: int, g: int, b: int, a: float = 1.0,
) -> tuple[float, float, float, float]:
    """
    Convert byte RGB plus alpha to HSLA.

    When several channels share the maximum, red wins over green and
    green wins over blue for picking the hue sector.

    Args:
        r, g, b: Channels in [0, 255]
        a: Alpha, passed through unrounded

    Returns:
        Tuple of (h, s, l, a):
        - h: Hue in degrees [0, 360], rounded to whole degrees
        - s: Saturation [0, 1], rounded to 2 places
        - l: Lightness [0, 1], rounded to 2 places
    """
    r = r / RGB_MAX
    g = g / RGB_MAX
    b = b / RGB_MAX
    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo

    if hi == lo:
        h = 0.0
    elif r == hi:
        h = (g - b) / delta
    elif g == hi:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta

    h = min(h * 60.0, 360.0)
    if h < 0.0:
        h += 360.0

    l = (lo + hi) / 2.0

    # Achromatic: checked before dividing by delta
    if hi == lo:
        s = 0.0
    elif l <= 0.5:
        s = delta / (hi + lo)
    else:
        s = delta / (2.0 - hi - lo)

    return (
        round_to(h, HUE_DIGITS),
        round_to(s, SL_DIGITS),
        round_to(l, SL_DIGITS),
        a,
    )


# =============================================================================
# HSL → RGB
# =============================================================================


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """
    Evaluate one RGB channel of the HSL → RGB algorithm.

    ``t`` is the hue offset for the channel, wrapped once into [0, 1].
    """
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def _to_byte(n: float) -> int:
    """Scale a [0, 1] channel to a saturated byte."""
    v = round_to(n * RGB_MAX, 0)
    if math.isnan(v):
        return 0
    return int(max(0.0, min(v, RGB_MAX)))


def hsl_to_rgb(
    hue: float, saturation: float, lightness: float,
) -> tuple[int, int, int]:
    """
    Convert HSL to byte RGB.

    Args:
        hue: Hue in degrees [0, 360)
        saturation: [0, 1], or a percentage when greater than 1
        lightness: [0, 1], or a percentage when greater than 1

    Returns:
        Tuple of (r, g, b), each 0-255
    """
    h = hue / 360.0
    s = to_decimal(saturation)
    l = to_decimal(lightness)

    if s == 0.0:
        r = g = b = l
    else:
        if l < 0.5:
            q = l * (s + 1.0)
        else:
            q = l + s - (l * s)
        p = (l * 2.0) - q
        r = hue_to_rgb(p, q, h + (1.0 / 3.0))
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - (1.0 / 3.0))

    return _to_byte(r), _to_byte(g), _to_byte(b)
