from .construction import TriangleConstruction, ck_length, constraint_test, construct
from .errors import PrecisionError, SolverOptionsError
from .numbers import PRECISIONS, as_real, format_fixed, real_type
from .printer import format_points, format_report
from .solver import SolveOptions, SolveResult, alpha_degrees, solve
from .vectors import Vec2, angle_between, dot, magnitude, subtract

__all__ = [
    'TriangleConstruction',
    'ck_length',
    'constraint_test',
    'construct',
    'PrecisionError',
    'SolverOptionsError',
    'PRECISIONS',
    'as_real',
    'format_fixed',
    'real_type',
    'format_points',
    'format_report',
    'SolveOptions',
    'SolveResult',
    'alpha_degrees',
    'solve',
    'Vec2',
    'angle_between',
    'dot',
    'magnitude',
    'subtract',
]
