"""
ANOVA solver.

Public API:
    anova(groups) -> AnovaSolution
"""

import math
import time
from collections.abc import Sequence

from statplayground.core.compute.tolerances import F_SENTINEL
from statplayground.core.exceptions import ValidationError
from statplayground.core.result import Result
from statplayground.core.summary import GroupSummary
from statplayground.distributions import f_sf
from statplayground.anova._common import AnovaParams, AnovaTableRow
from statplayground.anova.solution import AnovaSolution


def anova(groups: Sequence[GroupSummary]) -> AnovaSolution:
    """
    One-way Analysis of Variance from group summaries.

    Tests whether the means of two or more groups are equal, using only
    each group's mean, standard deviation and size:

        grand = sum(n_i m_i) / N
        SSB = sum(n_i (m_i - grand)^2),     dfB = K - 1
        SSW = sum((n_i - 1) sd_i^2),        dfW = N - K
        F = (SSB / dfB) / (SSW / dfW)

    The p-value is the F(dfB, dfW) upper tail via the regularised
    incomplete beta function.

    Args:
        groups: Sequence of at least two GroupSummary

    Returns:
        AnovaSolution with F, p-value, table and eta squared

    Boundary:
        If the within-group variance is zero, or so small that F overflows,
        nothing non-finite is returned. Identical means give F = 0, p = 1;
        otherwise F = F_SENTINEL and p = 0. The solution is flagged with
        boundary=True.

    Raises:
        ValidationError: Fewer than two groups, a non-GroupSummary entry,
            or dfW <= 0 (e.g. every group has size 1)

    Examples:
        >>> result = anova([GroupSummary(40, 8, 50), GroupSummary(50, 8, 50),
        ...                 GroupSummary(60, 8, 50)])
        >>> print(result.summary())
    """
    t0 = time.perf_counter()
    groups = tuple(groups)

    if len(groups) < 2:
        raise ValidationError(
            f"groups: requires at least 2 groups, got {len(groups)}"
        )
    for i, g in enumerate(groups):
        if not isinstance(g, GroupSummary):
            raise ValidationError(
                f"groups[{i}]: expected GroupSummary, got {type(g).__name__}"
            )

    k = len(groups)
    n_total = sum(g.size for g in groups)
    df_between = k - 1
    df_within = n_total - k
    if df_within <= 0:
        raise ValidationError(
            f"groups: within-group degrees of freedom must be > 0, got "
            f"{df_within} (N={n_total}, K={k})"
        )

    grand_mean = sum(g.size * g.mean for g in groups) / n_total
    # the weighted grand mean rounds; equal means must give SSB = 0 exactly
    means_equal = all(g.mean == groups[0].mean for g in groups)
    if means_equal:
        grand_mean = groups[0].mean
        ss_between = 0.0
    else:
        ss_between = sum(g.size * (g.mean - grand_mean) ** 2 for g in groups)
    ss_within = sum((g.size - 1) * g.variance for g in groups)

    ms_between = ss_between / df_between
    ms_within = ss_within / df_within

    warnings_list: list[str] = []
    f_value = ms_between / ms_within if ms_within > 0.0 else math.inf
    boundary = not math.isfinite(f_value)
    if boundary:
        if means_equal:
            f_value = 0.0
            p_value = 1.0
            warnings_list.append(
                "all groups have zero variance and equal means"
            )
        else:
            f_value = F_SENTINEL
            p_value = 0.0
            warnings_list.append(
                "zero variance within groups (or too small to divide by); "
                f"F set to {F_SENTINEL:g}"
            )
    else:
        p_value = f_sf(f_value, df_between, df_within)

    ss_total = ss_between + ss_within
    eta_sq = ss_between / ss_total if ss_total > 0 else 0.0

    rows = (
        AnovaTableRow(
            term='Groups',
            df=df_between,
            sum_sq=float(ss_between),
            mean_sq=float(ms_between),
            f_value=float(f_value),
            p_value=float(p_value),
        ),
        AnovaTableRow(
            term='Residuals',
            df=df_within,
            sum_sq=float(ss_within),
            mean_sq=float(ms_within),
            f_value=None,
            p_value=None,
        ),
    )

    elapsed = time.perf_counter() - t0

    params = AnovaParams(
        table=rows,
        f_value=float(f_value),
        p_value=float(p_value),
        n_obs=n_total,
        n_groups=k,
        grand_mean=float(grand_mean),
        group_means=tuple(g.mean for g in groups),
        df_between=df_between,
        df_within=df_within,
        eta_squared=float(eta_sq),
    )

    result = Result(
        params=params,
        info={
            'design_type': 'oneway_summary',
            'boundary': boundary,
        },
        timing={'total_seconds': elapsed},
        backend_name='analytic',
        warnings=tuple(warnings_list),
    )

    return AnovaSolution(_result=result)
