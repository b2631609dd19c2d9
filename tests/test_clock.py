"""
Tests for the clock-face unit.
"""

import unittest

from rich.text import Text

from trigunit import ClockFace, clock, degrees


class TestClockFace(unittest.TestCase):
    """Test ClockFace construction and display."""

    def test_from_hms(self):
        """Test building a position from hours, minutes and seconds."""
        angle = ClockFace.from_hms(3, 30)
        self.assertAlmostEqual(float(angle), 3.5)
        self.assertEqual(angle.hms, (3, 30, 0.0))
        self.assertAlmostEqual(float(ClockFace.from_hms(1, 0, 36)), 1.01)

    def test_twelve_is_zero(self):
        """Test twelve o'clock is the zero position."""
        self.assertEqual(float(clock(12)), 0.0)
        self.assertEqual(clock(12), clock(0))
        self.assertEqual(str(clock(12)), "12:00:00.000")

    def test_str(self):
        """Test dial readings."""
        self.assertEqual(str(ClockFace.from_hms(3, 30)), "03:30:00.000")
        self.assertEqual(str(clock(-3)), "09:00:00.000")

    def test_conversions(self):
        """Test clock positions convert like any other angle."""
        self.assertEqual(clock(3).to_degrees(), degrees(90))
        self.assertEqual(clock(3.5).to_degrees(), degrees(105))
        self.assertAlmostEqual(float(degrees(105).to_clock()), 3.5)
        self.assertIsInstance(clock(6) + degrees(90), ClockFace)
        self.assertAlmostEqual(float(clock(6) + degrees(90)), 9.0)

    def test_format(self):
        """Test numeric formatting uses the hour symbol."""
        self.assertEqual(format(clock(3), ".1f"), "3.0 h")
        self.assertEqual(format(clock(3)), "03:00:00.000")

    def test_seconds_carry_into_minute(self):
        """Test seconds that round to 60 carry into the next minute."""
        angle = ClockFace.from_hms(1, 0, 59.9999)
        self.assertEqual(angle.hms, (1, 1, 0.0))
        self.assertEqual(str(angle), "01:01:00.000")
        self.assertEqual(str(ClockFace.from_hms(3, 59, 59.9999)), "04:00:00.000")

    def test_carry_past_eleven(self):
        """Test a reading just short of a full turn shows twelve o'clock."""
        angle = ClockFace.from_hms(11, 59, 59.9999)
        self.assertEqual(angle.hms, (0, 0, 0.0))
        self.assertEqual(str(angle), "12:00:00.000")

    def test_rich(self):
        """Test the rich renderable shows the dial reading."""
        text = ClockFace.from_hms(3, 30).__rich__()
        self.assertIsInstance(text, Text)
        self.assertEqual(text.plain, "03:30:00.000")


if __name__ == "__main__":
    unittest.main()
