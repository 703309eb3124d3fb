"""
Tests for f_sf, the F upper tail.

Critical values from standard F tables (upper 5% and 1% points).
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from statplayground.core import ValidationError
from statplayground.distributions import f_sf


class TestAgainstTables:

    @pytest.mark.parametrize("f_crit, df1, df2, alpha", [
        (4.9646, 1, 10, 0.05),
        (3.3541, 2, 27, 0.05),
        (2.5336, 5, 30, 0.05),
        (4.9382, 3, 20, 0.01),
        (3.0576, 2, 147, 0.05),
    ])
    def test_critical_values(self, f_crit, df1, df2, alpha):
        assert f_sf(f_crit, df1, df2) == pytest.approx(alpha, abs=5e-4)


class TestAgainstScipy:

    @pytest.mark.parametrize("df1, df2", [(1, 5), (2, 27), (4, 100), (10, 12)])
    def test_grid(self, df1, df2):
        for f in [0.1, 0.5, 1.0, 2.0, 5.0, 20.0]:
            assert f_sf(f, df1, df2) == pytest.approx(
                sp_stats.f.sf(f, df1, df2), rel=1e-10
            )

    def test_closed_form_two_numerator_df(self):
        # with df1 = 2, P(F > f) = (1 + 2f/d2)^(-d2/2)
        f, d2 = 3.0, 27
        assert f_sf(f, 2, d2) == pytest.approx((1 + 2 * f / d2) ** (-d2 / 2),
                                                rel=1e-12)


class TestShape:

    def test_zero_and_negative_give_one(self):
        assert f_sf(0.0, 2, 10) == 1.0
        assert f_sf(-1.0, 2, 10) == 1.0

    def test_infinity_gives_zero(self):
        assert f_sf(math.inf, 2, 10) == 0.0

    def test_monotone_decreasing(self):
        values = [f_sf(f, 3, 40) for f in np.linspace(0.0, 30.0, 121)]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_bounded(self):
        for f in [1e-12, 1.0, 1e6]:
            assert 0.0 <= f_sf(f, 2, 147) <= 1.0


class TestValidation:

    @pytest.mark.parametrize("df1, df2", [(0, 10), (2, 0), (-1, 5)])
    def test_non_positive_df(self, df1, df2):
        with pytest.raises(ValidationError):
            f_sf(1.0, df1, df2)

    def test_nan_f(self):
        with pytest.raises(ValidationError):
            f_sf(math.nan, 2, 10)
