"""Type-safe angular units with circular normalization.

This package provides the angle family used throughout trigunit. Every
angle is an immutable value tagged by its unit class and stores a NumPy
magnitude reduced into that unit's domain.

Architecture:
    - unit_base: Unit class with family wiring, unit registry and precision resolution
    - unit_angle: Angle behaviour and the Radian, Degree, Gradian, Turn units
    - unit_clock: ClockFace unit for hour-hand positions

Available Units:
    - Radian: pivot unit, [0, 2π)
    - Degree: [0, 360)
    - Gradian: [0, 400)
    - Turn: [0, 1)
    - ClockFace: [0, 12) hours

Example:
    >>> from trigunit.unit import Degree, Radian
    >>> Degree(350) + Degree(20) == Degree(10)
    True
    >>> Degree(180) == Radian(3.141592653589793)
    True
"""

from .unit_angle import (
    Angle,
    Degree,
    Gradian,
    Radian,
    Turn,
    clock,
    degrees,
    gradians,
    radians,
    turns,
)
from .unit_base import Unit, resolve_dtype
from .unit_clock import ClockFace

__all__ = [
    # Base classes
    "Unit",
    "Angle",
    "resolve_dtype",
    # Angular units
    "Radian",
    "Degree",
    "Gradian",
    "Turn",
    "ClockFace",
    # Constructors
    "radians",
    "degrees",
    "gradians",
    "turns",
    "clock",
]
