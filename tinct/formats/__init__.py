# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Formatters and serializers for Color values.

Formatting never modifies the Color; every output is derived from the
current channels.
"""

from tinct.formats.base import CSSFormat, SerializerFormat
from tinct.formats.css import (
    format_number,
    to_css,
    to_hsla_string,
    to_pct,
    to_rgba_string,
)
from tinct.formats.serial import from_json, to_json

__all__ = [
    "CSSFormat",
    "SerializerFormat",
    "to_css",
    "to_rgba_string",
    "to_hsla_string",
    "format_number",
    "to_pct",
    "to_json",
    "from_json",
]
