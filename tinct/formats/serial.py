# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
JSON serializer for Color values.

Compact output is meant for storage and wire use; pretty output for
fixtures and humans.
"""

from __future__ import annotations

import json

from tinct.formats.base import SerializerFormat
from tinct.schema import Color


def to_json(
    color: Color,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    include_hex: bool = False,
) -> str:
    """Serialize a Color as JSON.

    Args:
        color: The Color to serialize.
        format: Output format (JSON or JSON_PRETTY).
        include_hex: Include the "#rrggbb" hex value.

    Returns:
        JSON string.

    Example (format=JSON_PRETTY, include_hex=True)::

        {
          "r": 0,
          "g": 137,
          "b": 255,
          "a": 1.0,
          "hex": "#0089ff"
        }
    """
    format = SerializerFormat(format)
    data = color.to_dict(include_hex=include_hex)

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    else:
        return json.dumps(data, separators=(",", ":"))


def from_json(text: str) -> Color:
    """Deserialize a Color from JSON produced by ``to_json``.

    A "hex" key, if present, is ignored; channels are authoritative.
    """
    return Color.from_dict(json.loads(text))
