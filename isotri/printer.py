from __future__ import annotations

from typing import Optional

from .config import REPORT_DIGITS
from .construction import TriangleConstruction
from .numbers import Real, format_fixed
from .solver import SolveResult


def format_report(result: SolveResult, alpha: Optional[Real] = None) -> str:
    """Return the four-line solver report.

    ``alpha`` defaults to the value derived from ``result.slope``.
    """

    if alpha is None:
        alpha = result.alpha()
    lines = [
        f"Total iterations = {result.iterations}",
        f"Slope of Line Segment BK = {format_fixed(result.slope, REPORT_DIGITS)}",
        f"Angle BKL Error = {format_fixed(result.error, REPORT_DIGITS)}",
        f"Alpha = {format_fixed(alpha, REPORT_DIGITS)}",
    ]
    return "\n".join(lines) + "\n"


def format_points(construction: TriangleConstruction, digits: int = REPORT_DIGITS) -> str:
    lines = ["Points:"]
    for name, point in construction.points().items():
        lines.append(f"  {name}: ({format_fixed(point.x, digits)}, {format_fixed(point.y, digits)})")
    return "\n".join(lines) + "\n"
