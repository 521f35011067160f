# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Conversion core for Tinct.

Pure functions over plain channel values; the ``Color`` type in
``tinct.schema`` is a thin wrapper around these.
"""

from tinct.convert.colorspace import (
    hsl_to_rgb,
    hue_to_rgb,
    is_light_luma,
    rgb_to_hsla,
    rgb_to_yiq,
)
from tinct.convert.hexcodec import hex_to_rgb, rgb_to_hex
from tinct.convert.numbers import round_to, to_decimal

__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_yiq",
    "rgb_to_hsla",
    "hsl_to_rgb",
    "hue_to_rgb",
    "is_light_luma",
    "round_to",
    "to_decimal",
]
