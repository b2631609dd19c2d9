"""
Tests for circular arithmetic and comparison of angles.
"""

import math
import unittest

from trigunit import Degree, Radian, Turn, degrees, gradians, radians, turns


class TestAddition(unittest.TestCase):
    """Test addition and subtraction."""

    def test_wraparound_addition(self):
        """Test sums past a full turn wrap around."""
        result = degrees(350) + degrees(20)
        self.assertIsInstance(result, Degree)
        self.assertAlmostEqual(float(result), 10.0, places=9)
        self.assertEqual(result, degrees(10))

    def test_triple_addition(self):
        """Test 180° + 180° + 180° is 180°."""
        self.assertEqual(degrees(180) + degrees(180) + degrees(180), degrees(180))

    def test_wraparound_subtraction(self):
        """Test differences below zero wrap to the top of the domain."""
        result = degrees(10) - degrees(20)
        self.assertAlmostEqual(float(result), 350.0, places=9)
        self.assertEqual(degrees(100) - degrees(100), degrees(0))

    def test_mixed_unit_operands(self):
        """Test mixed-unit sums keep the left operand's unit."""
        self.assertEqual(degrees(100) + degrees(100), degrees(200))
        self.assertEqual(degrees(100) + radians(0), degrees(100))
        self.assertIsInstance(degrees(100) + radians(0), Degree)
        self.assertEqual(radians(1) - degrees(0), radians(1))
        self.assertIsInstance(radians(1) - degrees(0), Radian)

    def test_left_unit_preserved(self):
        """Test the result unit follows the left operand."""
        result = turns(0.25) + degrees(90)
        self.assertIsInstance(result, Turn)
        self.assertAlmostEqual(float(result), 0.5)
        result = gradians(100) - turns(0.5)
        self.assertAlmostEqual(float(result), 300.0)

    def test_commutative_up_to_unit(self):
        """Test a + b and b + a denote the same angle."""
        a, b = degrees(300), gradians(150)
        self.assertEqual(a + b, b + a)

    def test_associative_up_to_normalization(self):
        """Test grouping does not change the wrapped result."""
        a, b, c = degrees(300), radians(2.5), turns(0.9)
        self.assertEqual((a + b) + c, a + (b + c))

    def test_named_methods(self):
        """Test add() and subtract() match the operators."""
        self.assertEqual(degrees(350).add(degrees(20)), degrees(10))
        self.assertEqual(degrees(10).subtract(degrees(20)), degrees(350))
        with self.assertRaises(TypeError):
            degrees(10).add(5)
        with self.assertRaises(TypeError):
            degrees(10).subtract(5)

    def test_add_number(self):
        """Test plain numbers cannot be added to angles."""
        with self.assertRaises(TypeError):
            degrees(10) + 5
        with self.assertRaises(TypeError):
            5 - degrees(10)


class TestUnaryAndScaling(unittest.TestCase):
    """Test negation and scalar multiplication."""

    def test_negation(self):
        """Test -a is the complement within the turn."""
        self.assertEqual(-degrees(90), degrees(270))
        self.assertEqual(-degrees(0), degrees(0))
        angle = degrees(10)
        self.assertIs(+angle, angle)
        self.assertIs(abs(angle), angle)

    def test_scalar_multiplication(self):
        """Test scaling wraps in the angle's own unit."""
        self.assertEqual(degrees(100) * 2, degrees(200))
        self.assertEqual(2 * degrees(200), degrees(40))
        self.assertEqual(degrees(90) / 2, degrees(45))
        self.assertEqual(turns(0.75) * -1, turns(0.25))

    def test_division_by_zero(self):
        """Test division by zero raises ZeroDivisionError."""
        with self.assertRaises(ZeroDivisionError):
            degrees(90) / 0

    def test_angle_times_angle(self):
        """Test angles cannot be multiplied together."""
        with self.assertRaises(TypeError):
            degrees(2) * degrees(100)
        with self.assertRaises(TypeError):
            degrees(2) / degrees(100)

    def test_non_finite_scale(self):
        """Test non-finite scale factors are rejected."""
        with self.assertRaises(ValueError):
            degrees(10) * math.inf
        with self.assertRaises(TypeError):
            degrees(10) * True


class TestComparison(unittest.TestCase):
    """Test equality and ordering."""

    def test_equality_across_units(self):
        """Test equivalent angles in different units are equal."""
        self.assertEqual(degrees(180), radians(math.pi))
        self.assertEqual(turns(0.25), gradians(100))
        self.assertNotEqual(degrees(10), degrees(11))

    def test_equality_across_zero(self):
        """Test angles just below a full turn equal zero."""
        self.assertEqual(degrees(359.9999999999), degrees(0))
        self.assertEqual(degrees(0), radians(2 * math.pi - 1e-12))

    def test_equality_with_other_types(self):
        """Test angles never equal bare numbers."""
        self.assertFalse(degrees(10) == 10)
        self.assertTrue(degrees(10) != 10.0)

    def test_isclose(self):
        """Test explicit tolerances."""
        self.assertTrue(degrees(10).isclose(degrees(10.5), eps=math.radians(1)))
        self.assertFalse(degrees(10).isclose(degrees(10.5)))

    def test_ordering(self):
        """Test ordering by radian magnitude."""
        self.assertLess(degrees(10), degrees(20))
        self.assertGreater(gradians(100), degrees(45))
        self.assertLessEqual(degrees(90), radians(math.pi / 2))
        self.assertGreaterEqual(degrees(90), radians(math.pi / 2))
        self.assertFalse(degrees(90) < radians(math.pi / 2))
        self.assertFalse(degrees(90) > radians(math.pi / 2))
        self.assertEqual(sorted([degrees(300), turns(0.1), radians(3)]), [turns(0.1), radians(3), degrees(300)])

    def test_ordering_with_other_types(self):
        """Test ordering against numbers is refused."""
        with self.assertRaises(TypeError):
            degrees(10) < 20


if __name__ == "__main__":
    unittest.main()
