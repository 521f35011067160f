# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

Color is a mutable RGBA record with chainable setters. Every derived
view (RGB, RGBA, HSL, HSLA, YIQ) is a frozen dataclass computed on demand.
"""

from tinct.schema.color import (
    HSL,
    HSLA,
    RGB,
    RGBA,
    YIQ,
    Color,
)

__all__ = [
    # Core type
    "Color",
    # Derived views
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "YIQ",
]
