# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- Deterministic color values for CSS and design tooling.

Parses loose hex input, converts between RGB, HSL and YIQ, and formats
CSS color strings with reproducible rounding.

Quick start::

    from tinct import Color

    c = Color.from_hex("#0089ff")
    c.hsla()             # HSLA(h=208.0, s=1.0, l=0.5, a=1.0)
    c.to_hsla_string()   # 'hsla(208, 100%, 50%, 1)'
    c.is_dark            # True
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinct.formats import (
    CSSFormat,
    SerializerFormat,
    from_json,
    to_css,
    to_json,
)
from tinct.schema import (
    HSL,
    HSLA,
    RGB,
    RGBA,
    YIQ,
    Color,
)

__all__ = [
    # Core API
    "Color",
    # Views (commonly needed)
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "YIQ",
    # Formatting
    "CSSFormat",
    "SerializerFormat",
    "to_css",
    "to_json",
    "from_json",
    # Version
    "__version__",
]
