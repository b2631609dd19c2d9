"""Global configuration and numeric precision settings for trigunit.

This module centralizes the numeric types and tolerances shared by every
angle, conversion and trigonometric function in the package. Precision is
expressed as a NumPy floating type so that single and double precision
angles can coexist without implicit widening or narrowing.

Type Definitions:
    BASE_TYPE: Union type of the raw magnitudes accepted by constructors.

Settings:
    DEFAULT_DTYPE: Precision used when neither the caller nor the input
                   magnitude selects one.
    PRECISIONS: Per-precision tolerances. ``eps`` bounds equality between
                angles (in radians), ``pole`` bounds how close cos/sin may
                get to zero before tan/sec/cot/csc refuse to evaluate.
    PRECISION_ALIASES: String spellings accepted in place of a NumPy type.

Example:
    >>> from trigunit.config import PRECISIONS
    >>> import numpy as np
    >>> PRECISIONS[np.float32].eps
    1e-05
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

BASE_TYPE = int | float | np.floating


class Tolerance(NamedTuple):
    """Comparison tolerances for one floating precision."""

    eps: float
    pole: float


DEFAULT_DTYPE: type[np.floating] = np.float64

PRECISIONS: dict[type[np.floating], Tolerance] = {
    np.float32: Tolerance(eps=1e-5, pole=1e-6),
    np.float64: Tolerance(eps=1e-9, pole=1e-12),
}

PRECISION_ALIASES: dict[str, type[np.floating]] = {
    "single": np.float32,
    "float32": np.float32,
    "double": np.float64,
    "float64": np.float64,
}

LOG_LEVEL_ENV = "TRIGUNIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
