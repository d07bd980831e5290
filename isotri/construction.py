"""Closed-form reconstruction of the isosceles BKL triangle from slope ``m``.

Fixed points are ``C = (0, 0)`` and ``B = (1, 0)``.  ``K`` lies on the unit
circle around ``B`` (``x^2 + y^2 = 2x``) on the line ``y = m(1 - x)``, so that
``|CB| = |BK| = 1``.  The remaining points follow from the lines::

    CA : y = ((sqrt(m^2 + 1) + 1) / m) x
    BA : y = ((sqrt(m^2 + 1) + 1) / m) (1 - x)

``A`` is their intersection at ``x = 1/2`` and ``L`` sits on ``BA`` at
distance ``i = |CA| - |CK|`` from ``B``.  The constraint being solved is
``<BKL = 50 degrees``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Union

import numpy as np

from .logging_utils import debug_log_call
from .numbers import Real, as_real
from .vectors import Vec2, angle_between, magnitude

logger = logging.getLogger(__name__)

Slope = Union[int, float, np.floating]


@dataclass(frozen=True)
class TriangleConstruction:
    slope: Real
    B: Vec2
    C: Vec2
    K: Vec2
    A: Vec2
    L: Vec2
    slope_ck: Real
    j: Real
    i: Real
    k: Real

    def points(self) -> Dict[str, Vec2]:
        return {"B": self.B, "C": self.C, "K": self.K, "A": self.A, "L": self.L}


def _ck_length(m: Real) -> Real:
    return np.sqrt(2.0 - 2.0 / np.sqrt(m * m + 1.0))


def ck_length(m: Slope) -> Real:
    """Return ``|CK| = sqrt(2 - 2/sqrt(m^2 + 1))`` for slope ``m``."""

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _ck_length(as_real(m))


@debug_log_call(logger)
def construct(m: Slope) -> TriangleConstruction:
    """Rebuild points ``B, C, K, A, L`` for slope ``m`` of segment BK.

    ``m = 0`` and slopes that leave ``K`` off the real arc give inf/nan
    coordinates; nothing is raised.
    """

    m = as_real(m)
    real = type(m)
    B = Vec2(real(1.0), real(0.0))
    C = Vec2(real(0.0), real(0.0))

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        root = np.sqrt(m * m + 1.0)
        K = Vec2(1.0 - 1.0 / root, m / root)
        slope_ck = (root + 1.0) / m
        j = _ck_length(m)

        # Isosceles ABC puts the apex on x = 1/2.
        A = Vec2(real(0.5), slope_ck * 0.5)
        magnitude_a = magnitude(A)
        i = magnitude_a - j

        # |BA| == |CA| by symmetry, so |A| normalises B->A.
        L = B + (A - B) * i / magnitude_a

    return TriangleConstruction(
        slope=m, B=B, C=C, K=K, A=A, L=L, slope_ck=slope_ck, j=j, i=i, k=real(1.0)
    )


def constraint_test(m: Slope) -> Real:
    """Return the angle BKL in radians for slope ``m``."""

    built = construct(m)
    return angle_between(built.B, built.K, built.L)
