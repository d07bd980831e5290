"""2D vector primitives over numpy floating-point scalars."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .numbers import Real


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D point or vector.

    Coordinates keep whatever numpy scalar type they were built from, so an
    extended-precision construction stays extended end to end.
    """

    x: Real
    y: Real

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return subtract(self, other)

    def __mul__(self, scalar: Real) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: Real) -> "Vec2":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Real) -> "Vec2":
        # Division by zero yields inf/nan coordinates rather than raising.
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self):
        yield self.x
        yield self.y


def subtract(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(a.x - b.x, a.y - b.y)


def dot(a: Vec2, b: Vec2) -> Real:
    return a.x * b.x + a.y * b.y


def magnitude(v: Vec2) -> Real:
    return np.sqrt(dot(v, v))


def angle_between(a: Vec2, b: Vec2, c: Vec2) -> Real:
    """Return the angle at vertex ``b`` between rays ``b->a`` and ``b->c``.

    The cosine is not clamped: rounding that pushes it outside [-1, 1], or a
    zero-length ray, gives NaN instead of an exception.
    """

    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        ba = subtract(a, b)
        bc = subtract(c, b)
        return np.arccos(dot(ba, bc) / (magnitude(ba) * magnitude(bc)))
