# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for hex parsing and encoding."""

import logging

import pytest

from tinct.convert.hexcodec import (
    decode_channel,
    hex_to_rgb,
    rgb_to_hex,
    split_channels,
)


class TestSplitChannels:

    def test_six_digits(self):
        assert split_channels("0089ff") == ["00", "89", "ff"]

    def test_strips_hash_and_whitespace(self):
        assert split_channels("  #0089ff\n") == ["00", "89", "ff"]

    def test_strips_only_one_hash(self):
        assert split_channels("##0089ff") == ["#0", "08", "9f"]

    def test_odd_length_leaves_short_token(self):
        assert split_channels("12345") == ["12", "34", "5"]

    def test_reads_at_most_six_clusters(self):
        assert split_channels("#FFFFFFFFFFFF") == ["FF", "FF", "FF"]

    def test_empty(self):
        assert split_channels("") == []
        assert split_channels("#") == []

    def test_combining_mark_is_one_cluster(self):
        tokens = split_channels("0\u03010ff00")
        assert tokens == ["0\u03010", "ff", "00"]

    def test_crlf_is_one_cluster(self):
        assert split_channels("ff\r\nff00") == ["ff", "\r\nf", "f0"]


class TestDecodeChannel:

    @pytest.mark.parametrize("token,expected", [
        ("00", 0),
        ("89", 137),
        ("ff", 255),
        ("FF", 255),
        ("0a", 10),
    ])
    def test_valid(self, token, expected):
        assert decode_channel(token) == expected

    @pytest.mark.parametrize("token", [
        "WA",      # not hex
        "5",       # too short
        "",        # empty
        " f",      # int() would accept this
        "\u0663\u0663",  # Arabic-Indic digits, int() would accept these
        "0\u0301",  # combining mark
        "#0",
    ])
    def test_invalid_is_zero(self, token):
        assert decode_channel(token) == 0


class TestHexToRGB:

    @pytest.mark.parametrize("text,expected", [
        ("#0089ff", (0, 137, 255)),
        ("#068000", (6, 128, 0)),
        ("068000", (6, 128, 0)),
        ("0089FF", (0, 137, 255)),
        ("#FFFFFFFFFFFF", (255, 255, 255)),
        ("#FFFFF", (255, 255, 0)),
        ("12345", (18, 52, 0)),
        ("##0089ff", (0, 8, 159)),
    ])
    def test_parses(self, text, expected):
        assert hex_to_rgb(text) == expected

    @pytest.mark.parametrize("text", [
        "",
        "#",
        "068",
        "1234",
        "üçø",
        "ü§ªü¥¨üëå",
        "#WATNOPE",
        "\x00\x01\x02\x03\x04\x05",
        "\U0001F92A" * 6,
    ])
    def test_malformed_is_black(self, text):
        assert hex_to_rgb(text) == (0, 0, 0)

    def test_trailing_garbage_ignored(self):
        assert hex_to_rgb("0089ff" + "z" * 100_000) == (0, 137, 255)

    def test_combining_mark_does_not_shift_pairs(self):
        assert hex_to_rgb("0\u03010ff00") == (0, 255, 0)

    def test_non_string_raises(self):
        with pytest.raises(TypeError, match="string"):
            hex_to_rgb(0x0089FF)

    def test_logs_fallback(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tinct.convert.hexcodec"):
            hex_to_rgb("068")
        assert "falling back to black" in caplog.text


class TestRGBToHex:

    @pytest.mark.parametrize("rgb,expected", [
        ((0, 0, 0), "#000000"),
        ((255, 255, 255), "#ffffff"),
        ((0, 137, 255), "#0089ff"),
        ((6, 128, 0), "#068000"),
    ])
    def test_encodes(self, rgb, expected):
        assert rgb_to_hex(*rgb) == expected

    @pytest.mark.parametrize("text", ["#0089ff", "068000", "#A1B2C3", "ffffff"])
    def test_roundtrip(self, text):
        rgb = hex_to_rgb(text)
        assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb
