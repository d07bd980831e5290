"""Fixed constants of the BKL triangle construction and its solver."""

from __future__ import annotations

import math

# Iteration cap for the feedback loop.
MAX_ITERATIONS: int = 1000

# Starting slope of segment BK.
INITIAL_SLOPE: float = 1.0

# Proportional feedback gain applied to the angle error.
ERROR_TRANSFER_RATIO: float = 0.1

# |theta - target| at or below this stops the loop (radians).
ERROR_THRESHOLD: float = 1e-10

# Both are evaluated in double precision and only then widened.
RADIANS_TO_DEGREES: float = 180 / math.pi
TARGET_ANGLE: float = 50 * math.pi / 180

DEFAULT_PRECISION: str = "extended"

# Digits after the decimal point in the printed report.
REPORT_DIGITS: int = 20
