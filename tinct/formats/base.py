# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Base types for formatters and serializers."""

from enum import Enum


class CSSFormat(Enum):
    """Textual CSS color form."""

    HEX = "hex"
    RGBA = "rgba"
    HSLA = "hsla"


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
