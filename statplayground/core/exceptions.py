"""
Exception hierarchy for statplayground.

All exceptions inherit from StatPlaygroundError to allow catching any
library-specific error. Domain code raises the most specific class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Degenerate-but-legal computations are not errors; they return a
      documented boundary value and, where the caller cannot see it on a
      result object, emit NumericalBoundaryWarning
"""


class StatPlaygroundError(Exception):
    """Base exception for all statplayground errors."""
    pass


class ValidationError(StatPlaygroundError):
    """
    Input validation failed.

    Raised when caller-provided inputs are malformed: non-positive sample
    sizes, probabilities outside their domain, too few groups, degenerate
    degrees of freedom. Never silently coerced.
    """
    pass


class NumericalError(StatPlaygroundError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Raised when the bracketing root-finder does not meet its tolerance
    within the iteration cap.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final bracket width or step, if known
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold


class NumericalBoundaryWarning(UserWarning):
    """
    A computation returned a documented boundary value.

    Emitted when a solver saturates at the edge of its search domain, so the
    returned value is the boundary rather than an exact solution.
    """
    pass
