# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for rounding and percent/decimal normalization."""

import math

import pytest

from tinct.convert.numbers import round_to, to_decimal


class TestRoundTo:

    def test_whole_degrees(self):
        assert round_to(207.76, 0) == 208.0

    def test_two_places(self):
        assert round_to(0.50196, 2) == 0.5

    def test_half_rounds_away_from_zero(self):
        assert round_to(0.5, 0) == 1.0
        assert round_to(2.5, 0) == 3.0  # round() would give 2

    def test_negative_half_rounds_away_from_zero(self):
        assert round_to(-0.5, 0) == -1.0
        assert round_to(-2.5, 0) == -3.0

    def test_negative_non_half(self):
        assert round_to(-1.3, 0) == -1.0
        assert round_to(-1.7, 0) == -2.0

    def test_just_below_half(self):
        """0.49999999999999994 must not be bumped up by float addition."""
        assert round_to(0.49999999999999994, 0) == 0.0

    def test_default_digits(self):
        assert round_to(254.99999999999994) == 255.0

    def test_nan_passes_through(self):
        assert math.isnan(round_to(float("nan"), 2))

    def test_infinity_passes_through(self):
        assert round_to(float("inf"), 0) == float("inf")


class TestToDecimal:

    @pytest.mark.parametrize("value", [0.0, 0.3, 0.5, 1.0])
    def test_unit_interval_unchanged(self, value):
        assert to_decimal(value) == value

    def test_percent_scaled_down(self):
        assert to_decimal(50) == 0.5
        assert to_decimal(100) == 1.0

    def test_just_above_one(self):
        assert to_decimal(1.5) == pytest.approx(0.015)
