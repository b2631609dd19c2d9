"""Base unit system foundation for type-safe angles.

This module provides the Unit class that every angle unit derives from. It
implements the unit family system using automatic ROOT class assignment and
keeps a closed registry of the concrete units belonging to each family, so
a unit can be looked up by name or symbol and the set of variants cannot
drift from the classes actually defined.

It also resolves the numeric precision an angle is stored in. Precision is
a NumPy floating type (``numpy.float32`` or ``numpy.float64``) chosen by the
caller, inferred from a NumPy input, or taken from the package default.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base class of each family
- PERIOD: Length of a full turn in the unit; non-zero marks a concrete unit
- Registry: Concrete units are registered on their ROOT as they are defined

Classes:
    Unit: Base class for all unit types with family and precision management.

Functions:
    resolve_dtype: Pick the NumPy precision for a value.

Example:
    >>> class Angle(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Degree(Angle):
    ...     NAME = "degrees"
    ...     SYMBOL = "deg"
    ...     PERIOD = 360.0
    >>> Angle.unit_for("deg") is Degree
    True
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from ..config import DEFAULT_DTYPE, PRECISION_ALIASES, PRECISIONS
from ..errors import PrecisionError, UnknownUnitError


def resolve_dtype(dtype=None, value=None) -> type[np.floating]:
    """Pick the NumPy floating type used to store a value.

    Args:
        dtype: Explicit precision (NumPy type, ``numpy.dtype`` or one of
            "single", "double", "float32", "float64"). Wins when given.
        value: Raw magnitude. A NumPy float32 or float64 scalar carries its
            own precision, which is used when ``dtype`` is None; any other
            value gets the default precision.

    Returns:
        type[np.floating]: ``numpy.float32`` or ``numpy.float64``.

    Raises:
        PrecisionError: If the requested precision is unsupported.
    """
    if dtype is None:
        if type(value) in PRECISIONS:
            return type(value)
        return DEFAULT_DTYPE

    if isinstance(dtype, str):
        try:
            resolved = PRECISION_ALIASES[dtype.lower()]
        except KeyError:
            raise PrecisionError(f"Unsupported precision: {dtype!r}") from None
    else:
        try:
            resolved = np.dtype(dtype).type
        except TypeError:
            raise PrecisionError(f"Unsupported precision: {dtype!r}") from None

    if resolved not in PRECISIONS:
        raise PrecisionError(f"Unsupported precision: {np.dtype(resolved).name}")
    return resolved


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        NAME (ClassVar[str]): Canonical lower-case unit name.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        ALIASES (ClassVar[tuple[str, ...]]): Extra names accepted by lookup.
        PERIOD (ClassVar[float]): Magnitude of one full turn; 0 for abstract units.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    NAME: ClassVar[str] = ""
    SYMBOL: ClassVar[str] = ""
    ALIASES: ClassVar[tuple[str, ...]] = ()
    PERIOD: ClassVar[float] = 0.0
    IS_FAMILY_ROOT: ClassVar[bool] = False

    _VARIANTS: ClassVar[dict[str, type[Unit]]]

    def __init_subclass__(cls, **kwargs):
        """Set the ROOT class of a subclass and register concrete units.

        The ROOT is the first ancestor with IS_FAMILY_ROOT=True, or the class
        itself when it is marked as a root (or none is found). Classes with a
        non-zero PERIOD are added to their ROOT's registry.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            cls._VARIANTS = {}
        else:
            for base in cls.mro()[1:]:
                if base.__dict__.get("IS_FAMILY_ROOT", False):
                    cls.ROOT = base
                    break
            else:
                cls.ROOT = cls
                cls._VARIANTS = {}

        if cls.PERIOD:
            if cls.NAME in cls.ROOT._VARIANTS:
                raise TypeError(f"Unit {cls.NAME!r} is already defined")
            cls.ROOT._VARIANTS[cls.NAME] = cls

    @classmethod
    def units(cls) -> tuple[type[Unit], ...]:
        """Return every concrete unit of this family in definition order."""
        return tuple(cls.ROOT._VARIANTS.values())

    @classmethod
    def unit_for(cls, name: str) -> type[Unit]:
        """Look up a concrete unit of this family by name, symbol or alias.

        Args:
            name: Case-insensitive unit name, e.g. "deg", "°", "turns".

        Returns:
            type[Unit]: The matching unit class.

        Raises:
            UnknownUnitError: If no unit matches.
        """
        key = name.strip().lower()
        for unit in cls.ROOT._VARIANTS.values():
            names = (unit.NAME, unit.SYMBOL, unit.__name__, *unit.ALIASES)
            if key in (n.lower() for n in names):
                return unit
        raise UnknownUnitError(f"Unknown {cls.ROOT.__name__.lower()} unit: {name!r}")

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Check that a unit type belongs to the same family as this one.

        Raises:
            TypeError: If the unit belongs to another family or is abstract.
        """
        if not (isinstance(unit_type, type) and issubclass(unit_type, Unit)):
            raise TypeError(f"Expected a unit class, got {unit_type!r}")
        if cls.ROOT is not unit_type.ROOT:
            raise TypeError(f"Incompatible units: {cls.ROOT.__name__}, {unit_type.ROOT.__name__}")
        if not unit_type.PERIOD:
            raise TypeError(f"{unit_type.__name__} is not a concrete unit")
