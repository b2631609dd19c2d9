"""Typesafe trigonometry with a variety of angle formats.

trigunit models planar angles as immutable values tagged by their unit:
radians, degrees, gradians, turns and clock-face hours. Magnitudes are
always reduced into the unit's domain, conversions go through radians, and
arithmetic between angles of different units returns the left operand's
unit. Numeric precision (single or double) is chosen by the caller and kept
through every conversion and trigonometric call.

Package Components:
    Angle units (trigunit.unit):
        • Angle: abstract base with conversion, arithmetic and comparison
        • Radian, Degree, Gradian, Turn, ClockFace: the closed set of units
        • radians(), degrees(), gradians(), turns(), clock(): constructors

    Trigonometry (trigunit.trig):
        • sin, cos, tan, sec, csc, cot of any angle
        • asin, acos, atan, atan2 returning angles

    Errors (trigunit.errors):
        • InvalidMagnitude: NaN or infinite magnitude
        • DomainError: function evaluated where it is undefined
        • PrecisionError: unsupported or mixed precisions
        • UnknownUnitError: unit name lookup failed

    Presentation (trigunit.display, trigunit.logging_config):
        • conversion_table(): rich table of angles in every unit
        • setup_logging(): rich log handler for the package logger

Example:
    >>> from trigunit import degrees, radians, turns, sin
    >>> degrees(350) + degrees(20) == degrees(10)
    True
    >>> abs(float(sin(degrees(180))) - float(sin(radians(3.141592653589793)))) < 1e-12
    True
    >>> print(turns(0.25).to_degrees())
    90.0°
"""

from .display import conversion_table, print_conversions
from .errors import (
    DomainError,
    InvalidMagnitude,
    PrecisionError,
    TrigUnitError,
    UnknownUnitError,
)
from .logging_config import get_logger, setup_logging
from .trig import acos, asin, atan, atan2, cos, cot, csc, sec, sin, tan
from .unit import (
    Angle,
    ClockFace,
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

__version__ = "0.1.0"

__all__ = [
    # Angle units
    "Angle",
    "Radian",
    "Degree",
    "Gradian",
    "Turn",
    "ClockFace",
    "radians",
    "degrees",
    "gradians",
    "turns",
    "clock",
    # Trigonometry
    "sin",
    "cos",
    "tan",
    "sec",
    "csc",
    "cot",
    "asin",
    "acos",
    "atan",
    "atan2",
    # Errors
    "TrigUnitError",
    "InvalidMagnitude",
    "DomainError",
    "PrecisionError",
    "UnknownUnitError",
    # Presentation
    "conversion_table",
    "print_conversions",
    "setup_logging",
    "get_logger",
]
