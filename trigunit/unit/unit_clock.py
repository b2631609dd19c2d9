"""Clock-face angular unit.

The ClockFace unit reads an angle the way the hour hand of a 12 hour dial
shows it: a full turn is 12 hours, 3 o'clock is a quarter turn. Magnitudes
are fractional hours in [0, 12); minutes and seconds are derived from the
fraction.

Classes:
    ClockFace: Angular unit in hours on a 12 hour dial.

Example:
    >>> half_past_three = ClockFace.from_hms(3, 30)
    >>> print(half_past_three)  # "03:30:00.000"
    >>> print(half_past_three.to_degrees())  # "105.0°"
"""

from __future__ import annotations

from rich.text import Text

from .unit_angle import Angle, Number


class ClockFace(Angle):
    """Angular unit: position of the hour hand on a 12 hour clock.

    Attributes:
        PERIOD (float): 12.0 hours per full turn.
        SYMBOL (str): "h", shown after the magnitude by ``format``.

    Example:
        >>> noon = ClockFace(12)
        >>> print(noon)  # "12:00:00.000"
        >>> float(noon)  # 0.0
    """

    __slots__ = ()

    NAME = "clock"
    SYMBOL = "h"
    ALIASES = ("clock_face", "clockface", "hours")
    PERIOD = 12.0
    DISPLAY = "{} h"

    @classmethod
    def from_hms(cls, hour: Number, minute: Number = 0, second: Number = 0, dtype=None) -> ClockFace:
        """Create a clock-face angle from hours, minutes and seconds.

        Args:
            hour: Hour on the dial; 12 and 0 are the same position.
            minute: Minutes past the hour.
            second: Seconds past the minute.
            dtype: NumPy precision of the result.

        Returns:
            ClockFace: Normalized angle.
        """
        return cls(hour + minute / 60 + second / 3600, dtype=dtype)

    @property
    def hms(self) -> tuple[int, int, float]:
        """Hours (0-11), minutes and seconds shown by the hour hand."""
        # millisecond resolution, so seconds never display as 60
        total = round(float(self) * 3600, 3) % 43200
        h, r = divmod(total, 3600)
        m, s = divmod(r, 60)
        return int(h), int(m), round(s, 3)

    def __rich__(self) -> Text:
        return Text(str(self), style="bold cyan")

    def __str__(self) -> str:
        """Return the dial reading as "HH:MM:SS.sss", showing 12 rather than 0."""
        h, m, s = self.hms
        return f"{h or 12:02d}:{m:02d}:{s:06.3f}"
