# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color v1.0 — the RGBA value type and its derived views.

Design principles:
- Total: Every construction path yields a Color, never an exception
- Clamped: Channels are forced into range on every write
- Deterministic: Same channels → same derived views, bit for bit

Color is the one mutable type here. Its setters return the instance so
several channels can be configured in one expression::

    Color().set_r(10).set_g(20).set_a(0.5)

Derived views (RGB, RGBA, HSL, HSLA, YIQ) are frozen dataclasses,
recomputed on every call from the current channels.

HSLA:
- h (Hue): 0-360 degrees, whole numbers
- s (Saturation): 0.0 = gray, 1.0 = fully saturated, 2 decimal places
- l (Lightness): 0.0 = black, 1.0 = white, 2 decimal places
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tinct.convert.colorspace import (
    hsl_to_rgb,
    is_light_luma,
    rgb_to_hsla,
    rgb_to_yiq,
)
from tinct.convert.hexcodec import hex_to_rgb, rgb_to_hex


# =============================================================================
# Channel Helpers
# =============================================================================


def _clamp_byte(value: int) -> int:
    """Saturate a channel value into [0, 255]. NaN becomes 0."""
    if isinstance(value, int):
        return max(0, min(value, 255))
    value = float(value)
    if math.isnan(value):
        return 0
    return int(max(0.0, min(value, 255.0)))


def _clamp_unit(value: float) -> float:
    """Clamp alpha into [0.0, 1.0]. NaN becomes fully opaque."""
    value = float(value)
    if math.isnan(value):
        return 1.0
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


# =============================================================================
# Derived Views
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """Byte channels without alpha."""
    r: int
    g: int
    b: int

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class RGBA:
    """Byte channels with unit-interval alpha."""
    r: int
    g: int
    b: int
    a: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


@dataclass(frozen=True, slots=True)
class HSL:
    """
    Hue, saturation, lightness.

    Attributes:
        h: Hue in degrees (0-360)
        s: Saturation (0.0-1.0)
        l: Lightness (0.0-1.0)
    """
    h: float
    s: float
    l: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True, slots=True)
class HSLA:
    """
    Hue, saturation, lightness and alpha.

    Attributes:
        h: Hue in degrees (0-360), rounded to whole degrees
        s: Saturation (0.0-1.0), rounded to 2 places
        l: Lightness (0.0-1.0), rounded to 2 places
        a: Alpha (0.0-1.0), unrounded
    """
    h: float
    s: float
    l: float
    a: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l, "a": self.a}


@dataclass(frozen=True, slots=True)
class YIQ:
    """
    Luma and chrominance.

    Attributes:
        y: Luma (0-255 for byte channels)
        i: In-phase chrominance (orange-blue axis)
        q: Quadrature chrominance (purple-green axis)
    """
    y: float
    i: float
    q: float

    @property
    def is_light(self) -> bool:
        """True if the luma reads as a light color."""
        return is_light_luma(self.y)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"y": self.y, "i": self.i, "q": self.q}


# =============================================================================
# Color
# =============================================================================


@dataclass(slots=True)
class Color:
    """
    An RGBA color value.

    ``Color()`` is opaque black. Out-of-range channel values are clamped
    rather than rejected: r, g and b saturate into [0, 255] and alpha into
    [0.0, 1.0].

    Attributes:
        r: Red (0-255)
        g: Green (0-255)
        b: Blue (0-255)
        a: Alpha (0.0 = fully transparent, 1.0 = opaque)
    """
    r: int = 0
    g: int = 0
    b: int = 0
    a: float = 1.0

    def __post_init__(self) -> None:
        """Route the initial channels through the clamping setters."""
        self.set_r(self.r).set_g(self.g).set_b(self.b).set_a(self.a)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """
        Parse a hex string like "#0089ff".

        Malformed input never raises: too-short input gives opaque black,
        and an undecodable channel pair gives 0 for that channel.
        Alpha is always 1.0.
        """
        r, g, b = hex_to_rgb(text)
        return cls(r, g, b, 1.0)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> Color:
        """
        Convert HSL to a Color.

        Args:
            hue: Hue in degrees [0, 360)
            saturation: [0, 1], or a percentage when greater than 1
            lightness: [0, 1], or a percentage when greater than 1
        """
        r, g, b = hsl_to_rgb(hue, saturation, lightness)
        return cls(r, g, b, 1.0)

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary. Alpha defaults to 1.0."""
        return cls(
            r=data["r"],
            g=data["g"],
            b=data["b"],
            a=data.get("a", 1.0),
        )

    def copy(self) -> Color:
        """Return an independent Color with the same channels."""
        return type(self)(self.r, self.g, self.b, self.a)

    # ------------------------------------------------------------------
    # Channel setters (chainable)
    # ------------------------------------------------------------------

    def set_r(self, r: int) -> Color:
        self.r = _clamp_byte(r)
        return self

    def set_g(self, g: int) -> Color:
        self.g = _clamp_byte(g)
        return self

    def set_b(self, b: int) -> Color:
        self.b = _clamp_byte(b)
        return self

    def set_a(self, a: float) -> Color:
        """Set alpha, clamped into [0.0, 1.0]."""
        self.a = _clamp_unit(a)
        return self

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def hex(self) -> str:
        """
        Lowercase hex string like "#0089ff".

        Alpha is not represented.
        """
        return rgb_to_hex(self.r, self.g, self.b)

    def rgb(self) -> RGB:
        return RGB(self.r, self.g, self.b)

    def rgba(self) -> RGBA:
        return RGBA(self.r, self.g, self.b, self.a)

    def yiq(self) -> YIQ:
        """Luma/chrominance view, unrounded. Alpha is ignored."""
        return YIQ(*rgb_to_yiq(self.r, self.g, self.b))

    def hsla(self) -> HSLA:
        """HSLA view with rounded h/s/l and alpha passed through."""
        return HSLA(*rgb_to_hsla(self.r, self.g, self.b, self.a))

    def hsl(self) -> HSL:
        h, s, l, _ = rgb_to_hsla(self.r, self.g, self.b, self.a)
        return HSL(h, s, l)

    def to_rgba_string(self) -> str:
        """CSS ``rgba(r, g, b, a)`` string."""
        from tinct.formats.css import to_rgba_string
        return to_rgba_string(self)

    def to_hsla_string(self) -> str:
        """CSS ``hsla(h, s%, l%, a)`` string."""
        from tinct.formats.css import to_hsla_string
        return to_hsla_string(self)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @property
    def is_light(self) -> bool:
        """True if YIQ luma is at least 128."""
        return self.yiq().is_light

    @property
    def is_dark(self) -> bool:
        return not self.is_light

    @property
    def is_transparent(self) -> bool:
        """True only when alpha is exactly 0.0."""
        return self.a == 0.0

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self, include_hex: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_hex: If True, include the "#rrggbb" hex value
        """
        d = {"r": self.r, "g": self.g, "b": self.b, "a": self.a}
        if include_hex:
            d["hex"] = self.hex
        return d
