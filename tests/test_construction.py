import math
import warnings

import numpy as np
import pytest
from scipy.optimize import brentq

from isotri.construction import ck_length, constraint_test, construct
from isotri.numbers import format_fixed
from isotri.vectors import magnitude

TARGET = math.radians(50)
ROOT = math.tan(math.radians(40))


def test_unit_slope_gives_twenty_two_and_a_half_degrees():
    assert math.degrees(float(constraint_test(1.0))) == pytest.approx(22.5, abs=1e-9)


def test_tan_forty_degrees_satisfies_constraint():
    theta = constraint_test(np.longdouble(ROOT))
    assert abs(float(theta) - TARGET) < 1e-12


def test_construction_respects_triangle_lengths():
    built = construct(0.8)

    assert float(magnitude(built.B - built.C)) == pytest.approx(1.0, abs=1e-15)
    assert float(magnitude(built.K - built.B)) == pytest.approx(1.0, abs=1e-15)
    assert built.k == 1
    # K sits on x^2 + y^2 = 2x
    assert float(built.K.x ** 2 + built.K.y ** 2) == pytest.approx(float(2 * built.K.x), abs=1e-15)
    assert float(magnitude(built.K)) == pytest.approx(float(built.j), abs=1e-15)

    assert built.A.x == 0.5
    assert float(magnitude(built.A)) == pytest.approx(float(magnitude(built.A - built.B)), abs=1e-15)
    assert float(built.K.y / built.K.x) == pytest.approx(float(built.slope_ck), rel=1e-15)

    assert float(magnitude(built.L - built.B)) == pytest.approx(float(built.i), abs=1e-15)
    assert float(built.i) == pytest.approx(float(magnitude(built.A) - built.j), abs=1e-15)
    # L lies on line BA
    ba = built.A - built.B
    bl = built.L - built.B
    assert float(ba.x * bl.y - ba.y * bl.x) == pytest.approx(0.0, abs=1e-15)


def test_fixed_points_are_origin_and_unit_x():
    built = construct(0.5)
    assert (built.B.x, built.B.y) == (1, 0)
    assert (built.C.x, built.C.y) == (0, 0)
    assert list(built.points()) == ["B", "C", "K", "A", "L"]


def test_ck_length_matches_internal_length():
    for m in (0.3, 0.84, 1.0, 2.5):
        built = construct(m)
        assert built.j == ck_length(m)
        assert float(built.j) == pytest.approx(float(np.sqrt(2 * built.K.x)), rel=1e-15)


def test_python_numbers_are_promoted_to_extended():
    assert isinstance(constraint_test(0.8), np.longdouble)
    assert isinstance(ck_length(1), np.longdouble)


def test_double_input_stays_double():
    built = construct(np.float64(0.8))
    assert isinstance(built.K.x, np.float64)
    assert isinstance(constraint_test(np.float64(0.8)), np.float64)


def test_zero_slope_returns_non_finite_without_raising():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        theta = constraint_test(0)
    assert not np.isfinite(theta)
    assert format_fixed(theta) in {"nan", "inf", "-inf"}


def test_constraint_decreases_through_the_root():
    samples = np.linspace(ROOT - 0.05, ROOT + 0.05, 21)
    thetas = [float(constraint_test(np.longdouble(m))) for m in samples]

    assert all(later < earlier for earlier, later in zip(thetas, thetas[1:]))
    # Feedback m += gain * (theta - target) pushes towards the root from both sides.
    assert thetas[0] - TARGET > 0
    assert thetas[-1] - TARGET < 0


def test_root_agrees_with_bracketing_solver():
    root = brentq(lambda m: float(constraint_test(np.float64(m))) - TARGET, 0.5, 1.0, xtol=1e-14)
    assert root == pytest.approx(ROOT, abs=1e-10)
