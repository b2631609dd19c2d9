"""Angular unit definitions with circular normalization.

This module provides the Angle family: an abstract Angle base holding the
conversion, arithmetic and trigonometric behaviour, and the concrete units
Radian, Degree, Gradian and Turn (the ClockFace unit lives in unit_clock).
Every angle stores its magnitude in its own unit, as a NumPy scalar of the
caller's precision, reduced into the unit's half-open domain [0, PERIOD).

Radians are the pivot unit: conversions, arithmetic and trigonometry all go
through the radian magnitude and convert back to the unit the caller asked
for. Because every result is reduced modulo a full turn, arithmetic is
circular: 350° + 20° is 10°, 10° - 20° is 350°, and the usual real-number
laws (associativity of + without wraparound, a - b < a for b > 0, ...) only
hold up to that reduction.

Equality is tolerance based. Two angles are equal when their radian
magnitudes lie within the precision's epsilon of each other on the circle,
whatever their units, so ``Degree(180) == Radian(pi)``. Angles are therefore
not hashable.

Classes:
    Angle: Abstract base for all angular units.
    Radian: Angular unit in radians (pivot unit), domain [0, 2π).
    Degree: Angular unit in degrees, domain [0, 360).
    Gradian: Angular unit in gradians (gon), domain [0, 400).
    Turn: Angular unit in full turns, domain [0, 1).

Functions:
    radians, degrees, gradians, turns, clock: Lower-case constructors.

Example:
    >>> heading = Degree(-90)
    >>> print(heading)  # "270.0°"
    >>> print(heading.to_radians())  # "4.71238898038469 rad"
    >>> print(heading + Radian(pi))  # "90.0°"
"""

from __future__ import annotations

import math
import numbers
from typing import ClassVar

import numpy as np
from rich.text import Text

from ..config import PRECISIONS
from ..errors import DomainError, InvalidMagnitude, PrecisionError
from ..logging_config import get_logger
from .unit_base import Unit, resolve_dtype

logger = get_logger(__name__)

TAU = 2 * math.pi

Number = int | float | np.floating


def _finite_scalar(value, dtype: type[np.floating], unit: str) -> np.floating:
    """Cast a raw magnitude to ``dtype`` and reject non-finite results."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"Magnitude must be a real number, got {type(value).__name__}")
    try:
        with np.errstate(over="ignore"):
            scalar = dtype(value)
    except OverflowError:
        logger.debug("Rejected magnitude %r for %s: overflow", value, unit)
        raise InvalidMagnitude(value, unit) from None
    if not np.isfinite(scalar):
        logger.debug("Rejected magnitude %r for %s", value, unit)
        raise InvalidMagnitude(value, unit)
    return scalar


class Angle(Unit):
    """Abstract base class for angles in the Euclidean plane.

    Concrete units set PERIOD (magnitude of one full turn), NAME, SYMBOL and
    DISPLAY. Instances are immutable: every operation returns a new angle.

    Attributes:
        IS_FAMILY_ROOT (bool): True, the root of the angle family.
        DISPLAY (ClassVar[str]): Format template used by ``str``.
    """

    __slots__ = ("_magnitude",)

    IS_FAMILY_ROOT = True
    DISPLAY: ClassVar[str] = "{}"

    def __new__(cls, value: Number, dtype=None):
        """Create a normalized angle.

        Args:
            value: Finite magnitude in this unit's scale.
            dtype: NumPy precision; inferred from ``value`` when omitted.

        Returns:
            Angle: New instance with the magnitude reduced into [0, PERIOD).

        Raises:
            InvalidMagnitude: If the magnitude is NaN or infinite.
            TypeError: If the magnitude is not a real number or the class is abstract.
        """
        if not cls.PERIOD:
            raise TypeError(f"{cls.__name__} is abstract; use one of {[u.__name__ for u in cls.units()]}")
        dt = resolve_dtype(dtype, value)
        magnitude = cls._normalize(_finite_scalar(value, dt, cls.NAME), dt)
        self = object.__new__(cls)
        object.__setattr__(self, "_magnitude", magnitude)
        return self

    @classmethod
    def _normalize(cls, value: np.floating, dtype: type[np.floating]) -> np.floating:
        """Reduce a magnitude into [0, PERIOD)."""
        period = dtype(cls.PERIOD)
        result = np.fmod(value, period)
        if result < 0:
            result = result + period
        # a tiny negative remainder can round up to the period itself
        if result >= period or result == 0:
            result = dtype(0)
        return dtype(result)

    # ---------------------------------- Constructors ----------------------------------
    @classmethod
    def radians(cls, value: Number, dtype=None) -> Radian:
        """Returns an angle in radians."""
        return Radian(value, dtype=dtype)

    @classmethod
    def degrees(cls, value: Number, dtype=None) -> Degree:
        """Returns an angle in degrees."""
        return Degree(value, dtype=dtype)

    @classmethod
    def gradians(cls, value: Number, dtype=None) -> Gradian:
        """Returns an angle in gradians."""
        return Gradian(value, dtype=dtype)

    @classmethod
    def turns(cls, value: Number, dtype=None) -> Turn:
        """Returns an angle in turns."""
        return Turn(value, dtype=dtype)

    @classmethod
    def clock(cls, value: Number, dtype=None):
        """Returns an angle as the hour hand would show it on a clock."""
        from .unit_clock import ClockFace

        return ClockFace(value, dtype=dtype)

    @classmethod
    def half(cls, dtype=None) -> Radian:
        """One half of the circle. In radians, this is π."""
        dt = resolve_dtype(dtype)
        return Radian(dt(math.pi), dtype=dt)

    @classmethod
    def quarter(cls, dtype=None) -> Radian:
        """One quarter of the circle. In radians, this is π/2."""
        dt = resolve_dtype(dtype)
        return Radian(dt(math.pi / 2), dtype=dt)

    @classmethod
    def sixth(cls, dtype=None) -> Radian:
        """One sixth of the circle. In radians, this is π/3."""
        dt = resolve_dtype(dtype)
        return Radian(dt(math.pi / 3), dtype=dt)

    @classmethod
    def eighth(cls, dtype=None) -> Radian:
        """One eighth of the circle. In radians, this is π/4."""
        dt = resolve_dtype(dtype)
        return Radian(dt(math.pi / 4), dtype=dt)

    # ---------------------------------- Accessors ----------------------------------
    @property
    def magnitude(self) -> np.floating:
        """Normalized magnitude in this angle's own unit."""
        return self._magnitude

    @property
    def dtype(self) -> type[np.floating]:
        """NumPy floating type the magnitude is stored in."""
        return type(self._magnitude)

    def astype(self, dtype) -> Angle:
        """Return the same angle stored in another precision."""
        return type(self)(self._magnitude, dtype=resolve_dtype(dtype))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._magnitude, self.dtype))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __float__(self) -> float:
        return float(self._magnitude)

    # ---------------------------------- Conversion ----------------------------------
    def _to_pivot(self) -> np.floating:
        """Radian magnitude of this angle, in its own precision."""
        dt = self.dtype
        return (self._magnitude / dt(self.PERIOD)) * dt(TAU)

    @classmethod
    def _from_pivot(cls, value: np.floating, dtype: type[np.floating]) -> Angle:
        """Build an angle of this unit from a radian magnitude."""
        return cls((value / dtype(TAU)) * dtype(cls.PERIOD), dtype=dtype)

    def as_unit(self, unit_type: type[Angle]) -> Angle:
        """Convert to another angular unit.

        Args:
            unit_type: Target unit class, e.g. Degree.

        Returns:
            Angle: Equivalent angle in the target unit and the same precision.

        Raises:
            TypeError: If the target is not a concrete angle unit.
        """
        self._check_same_root(unit_type)
        if unit_type is type(self):
            return self
        return unit_type._from_pivot(self._to_pivot(), self.dtype)

    def to(self, unit_type: type[Angle]) -> float:
        """Convert to another angular unit and return the bare magnitude."""
        return float(self.as_unit(unit_type))

    def to_radians(self) -> Radian:
        """Converts an angle to radians."""
        return self.as_unit(Radian)

    def to_degrees(self) -> Degree:
        """Converts an angle to degrees."""
        return self.as_unit(Degree)

    def to_gradians(self) -> Gradian:
        """Converts an angle to gradians."""
        return self.as_unit(Gradian)

    def to_turns(self) -> Turn:
        """Converts an angle to turns."""
        return self.as_unit(Turn)

    def to_clock(self):
        """Converts an angle to a clock-face position of the hour hand."""
        from .unit_clock import ClockFace

        return self.as_unit(ClockFace)

    # -------------------------------- Arithmetic Operations --------------------------------
    def _check_same_precision(self, other: Angle) -> None:
        """Refuse to combine angles stored in different precisions.

        Raises:
            PrecisionError: If the precisions differ.
        """
        if self.dtype is not other.dtype:
            raise PrecisionError(
                f"Cannot combine {np.dtype(self.dtype).name} and {np.dtype(other.dtype).name} angles; "
                "use astype() to convert explicitly"
            )

    def _combine(self, other: Angle, sign: int) -> Angle:
        self._check_same_precision(other)
        dt = self.dtype
        if sign > 0:
            total = self._to_pivot() + other._to_pivot()
        else:
            total = self._to_pivot() - other._to_pivot()
        total = Radian._normalize(total, dt)
        return type(self)._from_pivot(total, dt)

    def __add__(self, other: Angle) -> Angle:
        """Add two angles; the result is in the left operand's unit.

        Args:
            other: Angle in any unit.

        Returns:
            Angle: Sum reduced modulo one full turn.
        """
        if not isinstance(other, Angle):
            return NotImplemented
        return self._combine(other, 1)

    def __sub__(self, other: Angle) -> Angle:
        """Subtract two angles; the result wraps instead of going negative.

        Args:
            other: Angle in any unit.

        Returns:
            Angle: Difference reduced modulo one full turn, in the left operand's unit.
        """
        if not isinstance(other, Angle):
            return NotImplemented
        return self._combine(other, -1)

    def add(self, other: Angle) -> Angle:
        """Named form of ``a + b``."""
        if not isinstance(other, Angle):
            raise TypeError(f"Cannot add {type(other).__name__} to an angle")
        return self._combine(other, 1)

    def subtract(self, other: Angle) -> Angle:
        """Named form of ``a - b``."""
        if not isinstance(other, Angle):
            raise TypeError(f"Cannot subtract {type(other).__name__} from an angle")
        return self._combine(other, -1)

    def __neg__(self) -> Angle:
        return type(self)(-self._magnitude, dtype=self.dtype)

    def __pos__(self) -> Angle:
        return self

    def __abs__(self) -> Angle:
        return self

    def _scalar(self, k) -> np.floating:
        if isinstance(k, (bool, np.bool_)) or not isinstance(k, numbers.Real):
            raise TypeError(f"Angles can only be scaled by real numbers, got {type(k).__name__}")
        return _finite_scalar(k, self.dtype, "scale factor")

    def __mul__(self, k: Number) -> Angle:
        """Multiply by a real scalar, reducing the result in this unit."""
        if isinstance(k, Angle):
            return NotImplemented
        with np.errstate(over="ignore"):
            return type(self)(self._magnitude * self._scalar(k), dtype=self.dtype)

    def __rmul__(self, k: Number) -> Angle:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> Angle:
        """Divide by a real scalar, reducing the result in this unit.

        Raises:
            ZeroDivisionError: If k is zero.
        """
        if isinstance(k, Angle):
            return NotImplemented
        k = self._scalar(k)
        if k == 0:
            raise ZeroDivisionError("Angle division by zero")
        with np.errstate(over="ignore"):
            return type(self)(self._magnitude / k, dtype=self.dtype)

    # -------------------------------- Comparison --------------------------------
    def isclose(self, other: Angle, eps: float | None = None) -> bool:
        """Compare two angles on the circle within a tolerance.

        Args:
            other: Angle in any unit and the same precision.
            eps: Tolerance in radians; defaults to the precision's epsilon.

        Returns:
            bool: True if the circular distance is at most ``eps``.
        """
        self._check_same_precision(other)
        dt = self.dtype
        if eps is None:
            eps = PRECISIONS[dt].eps
        diff = abs(self._to_pivot() - other._to_pivot())
        return bool(min(diff, dt(TAU) - diff) <= eps)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        # angles of different precisions are never equal
        return self.dtype is other.dtype and self.isclose(other)

    def __ne__(self, other) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None

    def __lt__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return not self.isclose(other) and bool(self._to_pivot() < other._to_pivot())

    def __le__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.isclose(other) or bool(self._to_pivot() < other._to_pivot())

    def __gt__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return not self.isclose(other) and bool(self._to_pivot() > other._to_pivot())

    def __ge__(self, other: Angle) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.isclose(other) or bool(self._to_pivot() > other._to_pivot())

    # -------------------------------- Trigonometry --------------------------------
    def _pole_check(self, function: str, value: np.floating, vanishing: str) -> None:
        if abs(value) <= PRECISIONS[self.dtype].pole:
            logger.debug("%s evaluated at a pole: %s", function, self)
            raise DomainError(function, self, f"{vanishing} is zero")

    def sin(self) -> np.floating:
        """Compute the sine of the angle."""
        return np.sin(self._to_pivot())

    def cos(self) -> np.floating:
        """Compute the cosine of the angle."""
        return np.cos(self._to_pivot())

    def tan(self) -> np.floating:
        """Compute the tangent of the angle.

        Raises:
            DomainError: At odd multiples of a quarter turn, where cos is zero.
        """
        x = self._to_pivot()
        self._pole_check("tan", np.cos(x), "cosine")
        return np.tan(x)

    def sec(self) -> np.floating:
        """Compute the secant of the angle."""
        c = np.cos(self._to_pivot())
        self._pole_check("sec", c, "cosine")
        return c.dtype.type(1) / c

    def csc(self) -> np.floating:
        """Compute the cosecant of the angle."""
        s = np.sin(self._to_pivot())
        self._pole_check("csc", s, "sine")
        return s.dtype.type(1) / s

    def cot(self) -> np.floating:
        """Compute the cotangent of the angle."""
        x = self._to_pivot()
        s = np.sin(x)
        self._pole_check("cot", s, "sine")
        return np.cos(x) / s

    # -------------------------------- Display --------------------------------
    def __str__(self) -> str:
        """Return the magnitude with its unit, e.g. "90.0°" or "1.5 rad"."""
        return self.DISPLAY.format(self._magnitude)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._magnitude}, dtype={np.dtype(self.dtype).name})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return self.DISPLAY.format(format(self._magnitude, spec))

    def __rich__(self) -> Text:
        return Text.assemble((str(self._magnitude), "bold cyan"), (self.DISPLAY.format(""), "magenta"))


class Radian(Angle):
    """Angular unit: Radian, the pivot unit for conversions and trigonometry.

    Attributes:
        PERIOD (float): 2π.
        SYMBOL (str): "rad".

    Example:
        >>> print(Radian(7.0))  # "0.7168146928204138 rad"
    """

    __slots__ = ()

    NAME = "radians"
    SYMBOL = "rad"
    ALIASES = ("radian",)
    PERIOD = TAU
    DISPLAY = "{} rad"


class Degree(Angle):
    """Angular unit: Degree (1/360 of a full turn).

    Example:
        >>> print(Degree(-5))  # "355.0°"
    """

    __slots__ = ()

    NAME = "degrees"
    SYMBOL = "°"
    ALIASES = ("deg", "degree")
    PERIOD = 360.0
    DISPLAY = "{}°"


class Gradian(Angle):
    """Angular unit: Gradian, also called gon (1/400 of a full turn).

    Example:
        >>> print(Gradian(200).to_degrees())  # "180.0°"
    """

    __slots__ = ()

    NAME = "gradians"
    SYMBOL = "gon"
    ALIASES = ("grad", "gradian")
    PERIOD = 400.0
    DISPLAY = "{} gon"


class Turn(Angle):
    """Angular unit: Turn (one full revolution)."""

    __slots__ = ()

    NAME = "turns"
    SYMBOL = "tr"
    ALIASES = ("turn", "rev")
    PERIOD = 1.0
    DISPLAY = "{} turns"


def radians(value: Number, dtype=None) -> Radian:
    """Returns an angle in radians."""
    return Radian(value, dtype=dtype)


def degrees(value: Number, dtype=None) -> Degree:
    """Returns an angle in degrees."""
    return Degree(value, dtype=dtype)


def gradians(value: Number, dtype=None) -> Gradian:
    """Returns an angle in gradians."""
    return Gradian(value, dtype=dtype)


def turns(value: Number, dtype=None) -> Turn:
    """Returns an angle in turns."""
    return Turn(value, dtype=dtype)


def clock(value: Number, dtype=None):
    """Returns an angle as the hour hand would show it on a 12 hour clock."""
    return Angle.clock(value, dtype=dtype)
