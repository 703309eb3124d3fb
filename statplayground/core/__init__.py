"""
Core infrastructure for statplayground.

Shared abstractions used by every domain subpackage (distributions,
hypothesis, anova, hmm, explain).

Key components:
    summary: GroupSummary value object
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    protocols: Explainer protocol
    compute: Root-finder settings, sentinels, tolerance tiers
"""

from statplayground.core.summary import GroupSummary, combined_standard_error
from statplayground.core.protocols import Explainer
from statplayground.core.result import Result
from statplayground.core.exceptions import (
    StatPlaygroundError,
    ValidationError,
    NumericalError,
    ConvergenceError,
    NumericalBoundaryWarning,
)

__all__ = [
    # Value objects
    "GroupSummary",
    "combined_standard_error",
    # Protocols
    "Explainer",
    # Result
    "Result",
    # Exceptions
    "StatPlaygroundError",
    "ValidationError",
    "NumericalError",
    "ConvergenceError",
    "NumericalBoundaryWarning",
]
