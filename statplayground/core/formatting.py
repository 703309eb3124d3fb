"""
Display formatting shared by solution summaries and explainer contexts.
"""

import math


def format_p_value(p: float) -> str:
    """
    Format a p-value for display.

    Non-zero values below 0.001 switch to exponential notation so tiny
    p-values stay readable; everything else gets four decimals.

        >>> format_p_value(0.04321)
        '0.0432'
        >>> format_p_value(0.000123)
        '1.23e-04'
    """
    if math.isnan(p):
        return "NA"
    if 0.0 < p < 0.001:
        return f"{p:.2e}"
    return f"{p:.4f}"


def significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value."""
    if p is None or math.isnan(p):
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
