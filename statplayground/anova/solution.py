"""
User-facing ANOVA solution type.

Wraps a Result[AnovaParams] and provides accessors, the ANOVA table, and a
formatted summary matching R conventions.
"""

from dataclasses import dataclass
from typing import Any

from statplayground.core.formatting import format_p_value, significance_stars
from statplayground.core.result import Result
from statplayground.anova._common import AnovaParams, AnovaTableRow


@dataclass(frozen=True)
class AnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by anova().
    """
    _result: Result[AnovaParams]

    @property
    def statistic(self) -> float:
        """F statistic (Groups mean square over Residuals mean square)."""
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        """Upper-tail F probability, in [0, 1]."""
        return self._result.params.p_value

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (Groups row, Residuals row)."""
        return self._result.params.table

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def n_groups(self) -> int:
        return self._result.params.n_groups

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def group_means(self) -> tuple[float, ...]:
        return self._result.params.group_means

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

    @property
    def boundary(self) -> bool:
        """True when the zero within-group variance boundary was hit."""
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
        """Generate R-style ANOVA summary table."""
        lines = [
            "One-way Analysis of Variance (from group summaries)",
            "=" * 72,
            f"Groups: {self.n_groups}    Observations: {self.n_obs}",
            "",
            f"{'Source':<12} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
            "-" * 72,
        ]

        for row in self.table:
            if row.f_value is not None:
                sig = significance_stars(row.p_value)
                lines.append(
                    f"{row.term:<12} {row.df:>6} {row.sum_sq:>14.4f} "
                    f"{row.mean_sq:>14.4f} {row.f_value:>10.4f} "
                    f"{format_p_value(row.p_value):>12} {sig}"
                )
            else:
                lines.append(
                    f"{row.term:<12} {row.df:>6} {row.sum_sq:>14.4f} "
                    f"{row.mean_sq:>14.4f}"
                )

        lines.append("-" * 72)
        lines.append("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1")
        lines.append("")
        lines.append(f"Effect size: eta^2 = {self.eta_squared:.4f}")

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(k={self.n_groups}, n={self.n_obs}, "
            f"F={self.statistic:.4g}, p_value={self.p_value:.4g})"
        )
