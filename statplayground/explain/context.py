"""
Plain-text contexts for the conversational explainer.

Each builder renders the current parameters and results of one panel so
the explainer can answer questions about what the user is looking at.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from statplayground.anova.solution import AnovaSolution
from statplayground.core.exceptions import ValidationError
from statplayground.core.formatting import format_p_value
from statplayground.core.summary import GroupSummary
from statplayground.core.validation import check_finite_scalar, check_probability
from statplayground.hmm.models import HMMSequenceItem, TransitionModel
from statplayground.hmm.simulator import state_frequencies
from statplayground.hypothesis.solution import TestResult


# p-values below 10**-LOG_P_CAP pin the log-scale slider at its end
LOG_P_CAP = 4.0


def log_p_slider_value(p_value: float, cap: float = LOG_P_CAP) -> float:
    """
    Position of the log-scale p-value slider, -log10(p), capped.

    p = 1 maps to 0; p = 0 (and anything below 10**-cap) maps to cap.
    """
    p_value = check_probability(p_value, 'p_value', include_zero=True,
                                include_one=True)
    if p_value == 0.0:
        return cap
    return min(cap, -math.log10(p_value))


def target_p_from_slider(value: float, cap: float = LOG_P_CAP) -> float:
    """Inverse of log_p_slider_value: the p-value a slider position asks for."""
    value = check_finite_scalar(value, 'value')
    if not 0.0 <= value <= cap:
        raise ValidationError(f"value: must be in [0, {cap}], got {value}")
    return 10.0 ** (-value)


def _describe_group(label: str, group: GroupSummary) -> str:
    return (
        f"{label}: Mean={group.mean:g}, StdDev={group.std_dev:g}, "
        f"Size={group.size}"
    )


def _with_question(lines: list[str], question: str | None) -> str:
    if question:
        lines.append("")
        lines.append(f"User Question: {question}")
    return "\n".join(lines)


def z_test_context(
    a: GroupSummary,
    b: GroupSummary,
    result: TestResult,
    question: str | None = None,
) -> str:
    """Context for the two-group z-test panel."""
    lines = [
        "Current Z-Test Simulation State:",
        _describe_group("Group 1 (Control)", a),
        _describe_group("Group 2 (Experimental)", b),
        f"Result: Z-Score={result.statistic:.3f}, "
        f"p-value={format_p_value(result.p_value)}",
    ]
    return _with_question(lines, question)


def anova_context(
    groups: Sequence[GroupSummary],
    result: AnovaSolution,
    question: str | None = None,
) -> str:
    """Context for the one-way ANOVA panel."""
    lines = ["Current ANOVA Simulation State:"]
    for i, g in enumerate(groups, start=1):
        lines.append(_describe_group(f"Group {i}", g))
    lines.append(
        f"Result: F-Statistic={result.statistic:.3f} "
        f"(df={result.df_between}, {result.df_within}), "
        f"p-value={format_p_value(result.p_value)}, "
        f"eta^2={result.eta_squared:.3f}"
    )
    return _with_question(lines, question)


def hmm_context(
    transitions: TransitionModel,
    sequence: Sequence[HMMSequenceItem],
    question: str | None = None,
) -> str:
    """Context for the Hidden Markov Model panel."""
    lines = [
        "We are analyzing a Hidden Markov Model (HMM).",
        "Transition Probabilities:",
        f"P(Sunny|Sunny) = {transitions.sunny_to_sunny:g}",
        f"P(Rainy|Rainy) = {transitions.rainy_to_rainy:g}",
        f"Sequence length: {len(sequence)}",
    ]
    if sequence:
        freqs = state_frequencies(sequence)
        shares = ", ".join(
            f"{getattr(state, 'value', state)}={share:.2f}"
            for state, share in freqs.items()
        )
        lines.append(f"Observed state shares: {shares}")
    lines.append(
        "Explain how the transition probabilities affect the stability of "
        "the weather states and the resulting observations."
    )
    return _with_question(lines, question)


def coin_flip_context(
    bias: float,
    heads: int,
    tails: int,
    result: TestResult | None,
    question: str | None = None,
) -> str:
    """Context for the coin-flip hypothesis-testing panel."""
    lines = [
        "Hypothesis testing with a coin. H0: the coin is fair.",
        f"True coin bias (hidden from the student): {bias:g}",
        f"Observed data: {heads} Heads, {tails} Tails.",
    ]
    if result is None:
        lines.append("Calculated p-value: N/A")
    else:
        lines.append(f"Calculated p-value: {format_p_value(result.p_value)}")
    return _with_question(lines, question)
