"""
Hypothesis test solution type.

TestResult wraps Result[TestParams] and provides accessors plus a
plain-text summary in the style of R's print.htest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from statplayground.core.formatting import format_p_value
from statplayground.core.result import Result
from statplayground.hypothesis._common import TestParams


@dataclass(frozen=True)
class TestResult:
    """
    User-facing hypothesis test result.

    Immutable; a new one is produced on every call.
    """
    __test__ = False  # not a pytest test class

    _result: Result[TestParams]

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def p_value(self) -> float:
        """p-value in [0, 1]."""
        return self._result.params.p_value

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def estimate(self) -> dict[str, float] | None:
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float] | None:
        return self._result.params.null_value

    @property
    def std_error(self) -> float | None:
        return self._result.params.std_error

    @property
    def boundary(self) -> bool:
        """True when the zero-variance boundary value was returned."""
        return self._result.boundary

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """
        Format the result as text.

        Produces output like:
            Two Sample z-test

        data:  group a and group b
        z = -7.0711, p-value = 1.54e-12
        alternative hypothesis: true difference in means is not equal to 0
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]
        lines.append(
            f"{p.statistic_name} = {p.statistic:.5g}, "
            f"p-value = {format_p_value(p.p_value)}"
        )

        if p.null_value:
            nv_name, nv_val = next(iter(p.null_value.items()))
            relation = {
                "two.sided": "is not equal to",
                "less": "is less than",
                "greater": "is greater than",
            }[p.alternative]
            lines.append(
                f"alternative hypothesis: true {nv_name} {relation} {nv_val:g}"
            )

        if p.estimate:
            lines.append("estimates:")
            for name, val in p.estimate.items():
                lines.append(f"  {name}: {val:.7g}")

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TestResult(method={p.method!r}, {p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g})"
        )
