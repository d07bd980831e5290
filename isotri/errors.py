"""Exceptions raised for invalid solver setup.

Numeric degeneracy is never signalled through exceptions; NaN and infinities
propagate through the construction and end up in the printed report.
"""


class PrecisionError(ValueError):
    """Raised when an unknown floating-point precision is requested."""

    def __init__(self, precision: str, known):
        super().__init__(
            f"unknown precision {precision!r} (expected one of: {', '.join(sorted(known))})"
        )
        self.precision = precision


class SolverOptionsError(ValueError):
    """Raised when solver options cannot describe a bounded iteration."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
