"""
Tests for p-value display formatting.
"""

import math

import pytest

from statplayground.core.formatting import format_p_value, significance_stars


class TestFormatPValue:

    @pytest.mark.parametrize("p, expected", [
        (0.04321, "0.0432"),
        (0.5, "0.5000"),
        (1.0, "1.0000"),
        (0.001, "0.0010"),
        (0.000123, "1.23e-04"),
        (1.5e-12, "1.50e-12"),
    ])
    def test_values(self, p, expected):
        assert format_p_value(p) == expected

    def test_zero_is_fixed(self):
        assert format_p_value(0.0) == "0.0000"

    def test_nan(self):
        assert format_p_value(math.nan) == "NA"


class TestSignificanceStars:

    @pytest.mark.parametrize("p, expected", [
        (0.0001, "***"),
        (0.005, "**"),
        (0.03, "*"),
        (0.07, "."),
        (0.5, ""),
        (None, ""),
    ])
    def test_codes(self, p, expected):
        assert significance_stars(p) == expected
