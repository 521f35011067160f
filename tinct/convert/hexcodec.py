# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Hexadecimal color codec.

Parsing is deliberately forgiving: input is segmented into Unicode
extended grapheme clusters, so a combining sequence or an emoji counts
as one input unit and can never split a channel pair in the middle of
a code point sequence.

    "#0089ff"   → (0, 137, 255)
    "#WATNOPE"  → (0, 0, 0)      # undecodable pairs become 0
    "068"       → (0, 0, 0)      # fewer than 3 pairs → black
    "#FFFFFF00" → (255, 255, 255)  # extra clusters ignored
"""

from __future__ import annotations

import logging
from itertools import islice

import regex

logger = logging.getLogger(__name__)

MAX_HEX_CLUSTERS = 6

_GRAPHEME_RE = regex.compile(r"\X")
_BYTE_RE = regex.compile(r"[0-9A-Fa-f]{2}")


def split_channels(text: str) -> list[str]:
    """
    Split hex input into at most three two-cluster channel tokens.

    Surrounding whitespace is trimmed and at most one leading ``#`` is
    removed. Only the first ``MAX_HEX_CLUSTERS`` grapheme clusters are
    read; the last token may hold a single cluster when the input is short.
    """
    text = text.strip()
    if text.startswith("#"):
        text = text[1:]

    clusters = [
        m.group(0)
        for m in islice(_GRAPHEME_RE.finditer(text), MAX_HEX_CLUSTERS)
    ]
    return ["".join(clusters[i:i + 2]) for i in range(0, len(clusters), 2)]


def decode_channel(token: str) -> int:
    """Decode a two-digit hex token, or 0 if it is not exactly that."""
    if _BYTE_RE.fullmatch(token) is None:
        logger.debug("Undecodable hex channel %r, using 0", token)
        return 0
    return int(token, 16)


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """
    Parse a hex color string into an (r, g, b) byte triple.

    Never raises for string input. Returns ``(0, 0, 0)`` when fewer than
    three channel tokens can be formed.

    Args:
        text: Hex string like "#0089ff" or "0089FF"

    Returns:
        Tuple of (r, g, b), each 0-255

    Raises:
        TypeError: If ``text`` is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"Hex input must be a string, got {type(text).__name__}")

    channels = split_channels(text)
    if len(channels) < 3:
        logger.debug("Hex input %r too short, falling back to black", text)
        return 0, 0, 0

    r, g, b = (decode_channel(ch) for ch in channels[:3])
    return r, g, b


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Encode byte channels as a lowercase ``#rrggbb`` string.

    Returns:
        Hex string like "#0089ff"
    """
    return f"#{r:02x}{g:02x}{b:02x}"
