"""Proportional-feedback solver for the slope of segment BK."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .config import (
    DEFAULT_PRECISION,
    ERROR_THRESHOLD,
    ERROR_TRANSFER_RATIO,
    INITIAL_SLOPE,
    MAX_ITERATIONS,
    RADIANS_TO_DEGREES,
    TARGET_ANGLE,
)
from .construction import Slope, ck_length, constraint_test
from .errors import PrecisionError, SolverOptionsError
from .logging_utils import debug_log_call
from .numbers import Real, real_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveOptions:
    """Iteration controls. The 50 degree target is fixed."""

    max_iterations: int = MAX_ITERATIONS
    initial_slope: float = INITIAL_SLOPE
    gain: float = ERROR_TRANSFER_RATIO
    tolerance: float = ERROR_THRESHOLD
    precision: str = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if self.max_iterations < 0:
            raise SolverOptionsError("max_iterations", f"must be >= 0, got {self.max_iterations}")
        if not self.tolerance >= 0:
            raise SolverOptionsError("tolerance", f"must be >= 0, got {self.tolerance}")
        try:
            real_type(self.precision)
        except PrecisionError as exc:
            raise SolverOptionsError("precision", str(exc)) from exc


@dataclass(frozen=True)
class SolveResult:
    slope: Real
    error: Real
    iterations: int
    converged: bool
    precision: str = DEFAULT_PRECISION

    def alpha(self) -> Real:
        return alpha_degrees(self.slope)


@debug_log_call(logger)
def alpha_degrees(m: Slope) -> Real:
    """Return the apex angle of isosceles triangle BCK, in degrees.

    The base angles at C and K are both ``arccos(|CK| / 2)`` because
    ``|CB| = |BK| = 1``; the angle sum gives the third.
    """

    j = ck_length(m)
    with np.errstate(invalid="ignore"):
        angle_bck = np.arccos(j * 0.5) * RADIANS_TO_DEGREES
    return 180.0 - 2.0 * angle_bck


def solve(options: SolveOptions = SolveOptions()) -> SolveResult:
    """Drive ``constraint_test(m)`` towards 50 degrees.

    Each step applies ``m <- m + gain * (theta - target)``. Running out of
    iterations is not an error: the last slope and error are returned with
    ``converged=False``.
    """

    real = real_type(options.precision)
    m = real(options.initial_slope)
    target = real(TARGET_ANGLE)
    gain = real(options.gain)
    tolerance = real(options.tolerance)

    logger.info(
        "Solving BKL constraint: initial slope=%s gain=%s tolerance=%s max_iterations=%d precision=%s",
        options.initial_slope,
        options.gain,
        options.tolerance,
        options.max_iterations,
        options.precision,
    )

    error = real(np.nan)
    iterations = 0
    converged = False
    while not converged and iterations < options.max_iterations:
        theta = constraint_test(m)
        error = theta - target
        logger.debug("iteration %d: m=%s theta=%s error=%s", iterations, m, theta, error)
        if abs(error) <= tolerance:
            converged = True
        else:
            m = m + error * gain
            iterations += 1

    if not np.isfinite(error):
        logger.warning("Constraint error is not finite (error=%s, slope=%s)", error, m)
    if not converged:
        logger.warning(
            "Solver stopped after %d iteration(s) without reaching tolerance %s (error=%s)",
            iterations,
            options.tolerance,
            error,
        )
    else:
        logger.info("Converged after %d iteration(s): slope=%s error=%s", iterations, m, error)

    return SolveResult(
        slope=m,
        error=error,
        iterations=iterations,
        converged=converged,
        precision=options.precision,
    )
