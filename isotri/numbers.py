from __future__ import annotations

from typing import Dict, Union

import numpy as np

from .config import DEFAULT_PRECISION, REPORT_DIGITS
from .errors import PrecisionError

Real = np.floating

PRECISIONS: Dict[str, type] = {
    "extended": np.longdouble,
    "double": np.float64,
}


def real_type(precision: str = DEFAULT_PRECISION) -> type:
    """Return the numpy scalar type registered for ``precision``."""

    try:
        return PRECISIONS[precision]
    except KeyError:
        raise PrecisionError(precision, PRECISIONS) from None


def as_real(value: Union[int, float, np.floating], precision: str = DEFAULT_PRECISION) -> np.floating:
    """Coerce ``value`` to a numpy scalar, keeping numpy floats as they are."""

    if isinstance(value, np.floating):
        return value
    return real_type(precision)(value)


def format_fixed(value: Union[float, np.floating], digits: int = REPORT_DIGITS) -> str:
    """Render ``value`` with exactly ``digits`` decimals.

    ``format(np.longdouble(...), ".20f")`` goes through a Python float and
    drops the extra mantissa bits, so the digits come from numpy's Dragon4
    formatter instead.
    """

    if not isinstance(value, np.floating):
        value = np.float64(value)
    if np.isnan(value):
        return "nan"
    if np.isinf(value):
        return "-inf" if value < 0 else "inf"
    return np.format_float_positional(
        value,
        precision=digits,
        unique=False,
        fractional=True,
        trim="k",
    )
