"""Exception hierarchy for trigunit.

Every failure raised by the package derives from :class:`TrigUnitError` and
also from the built-in exception a caller would naturally catch, so both
``except InvalidMagnitude`` and ``except ValueError`` work.
"""

from __future__ import annotations


class TrigUnitError(Exception):
    """Base class for all trigunit errors."""


class InvalidMagnitude(TrigUnitError, ValueError):
    """Raised when an angle or trig argument is NaN or infinite."""

    def __init__(self, value, unit: str = "") -> None:
        self.value = value
        self.unit = unit
        where = f" for {unit}" if unit else ""
        super().__init__(f"Magnitude must be finite{where}, got {value!r}")


class DomainError(TrigUnitError, ValueError):
    """Raised when a trigonometric function is evaluated where it is undefined."""

    def __init__(self, function: str, value, reason: str = "") -> None:
        self.function = function
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(f"{function} is undefined at {value}{detail}")


class PrecisionError(TrigUnitError, TypeError):
    """Raised for unsupported precisions or mixed-precision operations."""


class UnknownUnitError(TrigUnitError, KeyError):
    """Raised when a unit name or symbol does not match any angle unit."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
