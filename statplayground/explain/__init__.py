"""
Glue between the engine and the external conversational explainer.

Public API:
    request_explanation(explainer, context) -> str   (async)
    z_test_context / anova_context / hmm_context / coin_flip_context
    log_p_slider_value(p) / target_p_from_slider(value)
"""

from statplayground.explain.context import (
    LOG_P_CAP,
    anova_context,
    coin_flip_context,
    hmm_context,
    log_p_slider_value,
    target_p_from_slider,
    z_test_context,
)
from statplayground.explain.service import DEFAULT_FALLBACK, request_explanation

__all__ = [
    "LOG_P_CAP",
    "anova_context",
    "coin_flip_context",
    "hmm_context",
    "log_p_slider_value",
    "target_p_from_slider",
    "z_test_context",
    "DEFAULT_FALLBACK",
    "request_explanation",
]
