"""
Upper tail of the F distribution.

    P(F > f) = I_x(d2/2, d1/2),   x = d2 / (d2 + d1 f)

where I is the regularised incomplete beta function. The result is
monotone decreasing in f and stays in [0, 1].
"""

import math

from scipy import special

from statplayground.core.exceptions import ValidationError
from statplayground.core.validation import check_finite_scalar


def f_sf(f_value: float, df_num: float, df_den: float) -> float:
    """
    Survival function of the F distribution.

    Args:
        f_value: Observed F (non-finite +inf is accepted and gives 0)
        df_num: Numerator degrees of freedom, > 0
        df_den: Denominator degrees of freedom, > 0

    Returns:
        P(F >= f_value), clamped to [0, 1]. f_value <= 0 gives 1.

    Raises:
        ValidationError: If a degrees-of-freedom argument is not positive
    """
    df_num = check_finite_scalar(df_num, 'df_num')
    df_den = check_finite_scalar(df_den, 'df_den')
    if df_num <= 0:
        raise ValidationError(f"df_num: must be > 0, got {df_num}")
    if df_den <= 0:
        raise ValidationError(f"df_den: must be > 0, got {df_den}")

    f_value = float(f_value)
    if math.isnan(f_value):
        raise ValidationError("f_value: must not be NaN")
    if f_value <= 0.0:
        return 1.0
    if math.isinf(f_value):
        return 0.0

    x = df_den / (df_den + df_num * f_value)
    p = float(special.betainc(df_den / 2.0, df_num / 2.0, x))
    return min(1.0, max(0.0, p))
