"""Unit-polymorphic trigonometric functions.

The forward functions accept an angle in any unit, evaluate through its
radian magnitude and return a NumPy scalar in the angle's precision, so
``sin(degrees(180))`` and ``sin(radians(pi))`` agree. The inverse functions
take plain real numbers and return angles, in radians unless another unit
is requested.

Undefined points raise DomainError instead of returning a huge or
non-finite number: tan and sec where the cosine vanishes, cot and csc where
the sine vanishes (within the precision's pole tolerance), asin and acos
outside [-1, 1].

Functions:
    sin, cos, tan, sec, csc, cot: Forward functions of an Angle.
    asin, acos, atan, atan2: Inverse functions returning an Angle.

Example:
    >>> from trigunit import degrees, sin, asin
    >>> round(float(sin(degrees(30))), 12)
    0.5
    >>> asin(0.5, unit="deg") == degrees(30)
    True
"""

from __future__ import annotations

import numbers

import numpy as np

from .config import PRECISIONS
from .errors import DomainError, InvalidMagnitude, PrecisionError
from .logging_config import get_logger
from .unit import Angle, Radian, resolve_dtype

logger = get_logger(__name__)


def _angle(function: str, angle) -> Angle:
    if not isinstance(angle, Angle):
        raise TypeError(f"{function}() expects an Angle, got {type(angle).__name__}")
    return angle


def sin(angle: Angle) -> np.floating:
    """Calculate the sine."""
    return _angle("sin", angle).sin()


def cos(angle: Angle) -> np.floating:
    """Calculate the cosine."""
    return _angle("cos", angle).cos()


def tan(angle: Angle) -> np.floating:
    """Calculate the tangent.

    Raises:
        DomainError: If the cosine of the angle is zero.
    """
    return _angle("tan", angle).tan()


def sec(angle: Angle) -> np.floating:
    """Calculate the secant."""
    return _angle("sec", angle).sec()


def csc(angle: Angle) -> np.floating:
    """Calculate the cosecant."""
    return _angle("csc", angle).csc()


def cot(angle: Angle) -> np.floating:
    """Calculate the cotangent."""
    return _angle("cot", angle).cot()


def _argument(function: str, value, dtype) -> np.floating:
    """Validate a real argument of an inverse function and cast it."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"{function}() expects a real number, got {type(value).__name__}")
    dt = resolve_dtype(dtype, value)
    try:
        with np.errstate(over="ignore"):
            x = dt(value)
    except OverflowError:
        # integers beyond float range saturate like float overflow
        x = dt(np.inf) if value > 0 else dt(-np.inf)
    if np.isnan(x):
        logger.debug("%s called with NaN", function)
        raise InvalidMagnitude(value, function)
    return x


def _result(radians: np.floating, unit) -> Angle:
    if isinstance(unit, str):
        unit = Angle.unit_for(unit)
    return Radian(radians, dtype=type(radians)).as_unit(unit)


def _bounded(function: str, value, dtype) -> np.floating:
    x = _argument(function, value, dtype)
    if not -1 <= x <= 1:
        logger.debug("%s called outside [-1, 1]: %r", function, value)
        raise DomainError(function, value, "argument outside [-1, 1]")
    return x


def asin(value, unit=Radian, dtype=None) -> Angle:
    """Calculate the arcsine.

    Args:
        value: Real number in [-1, 1].
        unit: Unit class or name of the result.
        dtype: Precision of the result; inferred from a NumPy ``value``.

    Returns:
        Angle: The principal value, normalized into the unit's domain
            (asin(-1) is three quarters of a turn).

    Raises:
        DomainError: If ``value`` lies outside [-1, 1].
        InvalidMagnitude: If ``value`` is NaN.
    """
    return _result(np.arcsin(_bounded("asin", value, dtype)), unit)


def acos(value, unit=Radian, dtype=None) -> Angle:
    """Calculate the arccosine, see :func:`asin`."""
    return _result(np.arccos(_bounded("acos", value, dtype)), unit)


def atan(value, unit=Radian, dtype=None) -> Angle:
    """Calculate the arctangent. Infinite arguments give a quarter turn."""
    return _result(np.arctan(_argument("atan", value, dtype)), unit)


def atan2(y, x, unit=Radian, dtype=None) -> Angle:
    """Calculate the angle of the point (x, y) from the positive x axis.

    Raises:
        PrecisionError: If y and x are NumPy scalars of different precisions
            and no ``dtype`` is given.
    """
    if dtype is None:
        precisions = {type(v) for v in (y, x) if type(v) in PRECISIONS}
        if len(precisions) > 1:
            raise PrecisionError("atan2() arguments have different precisions; pass dtype explicitly")
        dtype = precisions.pop() if precisions else None
    return _result(np.arctan2(_argument("atan2", y, dtype), _argument("atan2", x, dtype)), unit)
