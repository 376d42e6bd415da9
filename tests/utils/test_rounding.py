"""round_half_upのテスト"""

import math

import pytest

from robokeiba.utils.rounding import round_half_up


class TestRoundHalfUp:
    """round_half_up関数のテスト"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5.805, 5.81),
            (2.675, 2.68),
            (1.005, 1.01),
            (29.146, 29.15),
            (3.6666666, 3.67),
            (0.0, 0.0),
            (50.0, 50.0),
        ],
    )
    def test_rounds_half_up_to_two_decimals(self, value, expected):
        """x.xx5は切り上げる"""
        assert round_half_up(value) == expected

    def test_float_noise_is_ignored(self):
        """浮動小数点誤差で切り捨てにならない"""
        assert round_half_up(0.1161 * 50) == 5.81

    def test_digits(self):
        """桁数を指定できる"""
        assert round_half_up(3.45, 1) == 3.5
        assert round_half_up(12.5, 0) == 13.0

    def test_returns_float(self):
        """float型を返す"""
        assert isinstance(round_half_up(1.234), float)

    @pytest.mark.parametrize("value", [1e27, 1e30, 123456789012345678901234567890.0, 1e300])
    def test_large_values(self, value):
        """28桁を超える値でも例外にならない"""
        assert round_half_up(value) == value

    def test_non_finite_values_are_returned_as_is(self):
        """inf・nanはそのまま返す"""
        assert round_half_up(float("inf")) == float("inf")
        assert round_half_up(float("-inf")) == float("-inf")
        assert math.isnan(round_half_up(float("nan")))
