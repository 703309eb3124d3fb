"""
Tests for z_test() on group summaries.

Reference p-values from scipy.stats.norm; the engine's CDF agrees with it
to the NORMAL_CDF tolerance tier.
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from statplayground.core import GroupSummary, ValidationError
from statplayground.core.compute.tolerances import NORMAL_CDF, Z_SENTINEL
from statplayground.hypothesis import z_test


class TestTwoSided:

    def test_default_panel(self, control_group, experimental_group):
        result = z_test(control_group, experimental_group)
        assert result.statistic == pytest.approx(-10.0 / math.sqrt(2.0), rel=1e-12)
        assert result.p_value == pytest.approx(
            2 * sp_stats.norm.sf(10.0 / math.sqrt(2.0)), abs=2 * NORMAL_CDF.atol
        )
        assert result.statistic_name == "z"
        assert result.alternative == "two.sided"
        assert result.method == "Two Sample z-test"
        assert result.std_error == pytest.approx(math.sqrt(2.0))
        assert not result.boundary

    def test_moderate_difference(self):
        a = GroupSummary(mean=50.0, std_dev=10.0, size=30)
        b = GroupSummary(mean=45.0, std_dev=12.0, size=40)
        se = math.sqrt(100 / 30 + 144 / 40)
        z = 5.0 / se
        result = z_test(a, b)
        assert result.statistic == pytest.approx(z, rel=1e-12)
        assert result.p_value == pytest.approx(2 * sp_stats.norm.sf(z),
                                               abs=2 * NORMAL_CDF.atol)

    def test_identical_groups(self):
        a = GroupSummary(mean=50.0, std_dev=10.0, size=30)
        result = z_test(a, a)
        assert result.statistic == 0.0
        assert result.p_value == pytest.approx(1.0, abs=1e-6)

    def test_antisymmetry(self, control_group, experimental_group):
        ab = z_test(control_group, experimental_group)
        ba = z_test(experimental_group, control_group)
        assert ab.statistic == -ba.statistic
        assert ab.p_value == ba.p_value

    def test_p_value_in_unit_interval(self, rng):
        for _ in range(200):
            a = GroupSummary(rng.uniform(-100, 100), rng.uniform(0.1, 30),
                             int(rng.integers(1, 500)))
            b = GroupSummary(rng.uniform(-100, 100), rng.uniform(0.1, 30),
                             int(rng.integers(1, 500)))
            p = z_test(a, b).p_value
            assert 0.0 <= p <= 1.0

    def test_p_decreases_with_distance(self):
        fixed = GroupSummary(mean=50.0, std_dev=10.0, size=50)
        ps = [z_test(fixed, fixed.with_mean(50.0 + d)).p_value
              for d in np.linspace(0.0, 10.0, 21)]
        assert all(a >= b for a, b in zip(ps, ps[1:]))


class TestOneSided:

    def test_greater(self):
        a = GroupSummary(mean=52.0, std_dev=10.0, size=100)
        b = GroupSummary(mean=50.0, std_dev=10.0, size=100)
        result = z_test(a, b, alternative="greater")
        z = 2.0 / math.sqrt(2.0)
        assert result.p_value == pytest.approx(sp_stats.norm.sf(z),
                                               abs=NORMAL_CDF.atol)

    def test_less(self):
        a = GroupSummary(mean=52.0, std_dev=10.0, size=100)
        b = GroupSummary(mean=50.0, std_dev=10.0, size=100)
        result = z_test(a, b, alternative="less")
        z = 2.0 / math.sqrt(2.0)
        assert result.p_value == pytest.approx(sp_stats.norm.cdf(z),
                                               abs=NORMAL_CDF.atol)

    def test_one_sided_halves_two_sided(self):
        a = GroupSummary(mean=53.0, std_dev=10.0, size=60)
        b = GroupSummary(mean=50.0, std_dev=10.0, size=60)
        two = z_test(a, b).p_value
        greater = z_test(a, b, alternative="greater").p_value
        assert greater == pytest.approx(two / 2.0, rel=1e-12)

    def test_invalid_alternative(self, control_group, experimental_group):
        with pytest.raises(ValidationError, match="alternative"):
            z_test(control_group, experimental_group, alternative="two-sided")


class TestZeroVarianceBoundary:

    def test_equal_means(self):
        a = GroupSummary(mean=10.0, std_dev=0.0, size=5)
        result = z_test(a, a)
        assert result.boundary
        assert result.statistic == 0.0
        assert result.p_value == pytest.approx(1.0, abs=1e-6)
        assert result.std_error == 0.0

    def test_different_means_positive(self):
        a = GroupSummary(mean=12.0, std_dev=0.0, size=5)
        b = GroupSummary(mean=10.0, std_dev=0.0, size=5)
        result = z_test(a, b)
        assert result.boundary
        assert result.statistic == Z_SENTINEL
        assert result.p_value == 0.0
        assert result._result.has_warning("zero variance")

    def test_different_means_negative(self):
        a = GroupSummary(mean=8.0, std_dev=0.0, size=5)
        b = GroupSummary(mean=10.0, std_dev=0.0, size=5)
        result = z_test(a, b)
        assert result.statistic == -Z_SENTINEL
        assert result.p_value == 0.0

    def test_one_sided_boundary(self):
        a = GroupSummary(mean=12.0, std_dev=0.0, size=5)
        b = GroupSummary(mean=10.0, std_dev=0.0, size=5)
        assert z_test(a, b, alternative="greater").p_value == 0.0
        assert z_test(a, b, alternative="less").p_value == 1.0

    def test_one_zero_variance_group_is_regular(self):
        a = GroupSummary(mean=12.0, std_dev=0.0, size=5)
        b = GroupSummary(mean=10.0, std_dev=2.0, size=4)
        result = z_test(a, b)
        assert not result.boundary
        assert result.statistic == pytest.approx(2.0)

    def test_never_nan_or_inf(self):
        a = GroupSummary(mean=1e300, std_dev=0.0, size=1)
        b = GroupSummary(mean=-1e300, std_dev=0.0, size=1)
        result = z_test(a, b)
        assert math.isfinite(result.statistic)
        assert math.isfinite(result.p_value)

    def test_negligible_standard_error(self):
        a = GroupSummary(mean=1e200, std_dev=1e-160, size=1)
        b = GroupSummary(mean=0.0, std_dev=0.0, size=1)
        result = z_test(a, b)
        assert result.boundary
        assert result.statistic == Z_SENTINEL
        assert result.p_value == 0.0
        assert result.std_error > 0.0
        assert z_test(b, a).statistic == -Z_SENTINEL

    def test_opposite_extreme_means(self):
        a = GroupSummary(mean=1e308, std_dev=0.0, size=1)
        b = GroupSummary(mean=-1e308, std_dev=0.0, size=1)
        result = z_test(a, b)
        assert result.statistic == Z_SENTINEL
        assert math.isfinite(result.p_value)


class TestValidation:

    def test_rejects_non_summary(self, control_group):
        with pytest.raises(ValidationError, match="b: expected GroupSummary"):
            z_test(control_group, {"mean": 1.0, "std_dev": 1.0, "size": 3})


class TestSummary:

    def test_summary_text(self, control_group, experimental_group):
        text = z_test(control_group, experimental_group).summary()
        assert "Two Sample z-test" in text
        assert "z = -7.0711" in text
        assert "e-12" in text
        assert "not equal to 0" in text

    def test_repr(self, control_group, experimental_group):
        assert repr(z_test(control_group, experimental_group)).startswith(
            "TestResult(method='Two Sample z-test'"
        )
