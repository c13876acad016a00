import unittest
from unittest.mock import Mock

from number_theory_utils.calculator import NumberTheoryCalculator
from number_theory_utils.config import NumberTheoryConfig
from number_theory_utils.exceptions import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    InvalidArgumentError,
)
from number_theory_utils.interfaces import INumberTheoryCalculator


class TestNumberTheoryCalculator(unittest.TestCase):
    """
    Unit tests for the NumberTheoryCalculator class.

    Verifies that every operation delegates correctly and that the strict
    overflow policy follows the calculator's config.
    """

    def setUp(self):
        """Create a lenient calculator for each test."""
        self.calculator = NumberTheoryCalculator()

    def test_implements_interface(self):
        self.assertIsInstance(self.calculator, INumberTheoryCalculator)

    def test_sample_values(self):
        test_cases = [
            ("is_prime", (13,), True),
            ("gcd", (56, 98), 14),
            ("lcm", (8, 12), 24),
            ("fibonacci", (10,), 55),
            ("factorial", (6,), 720),
            ("is_perfect", (496,), True),
            ("digit_sum", (9876,), 30),
            ("reverse_digits", (1234,), 4321),
            ("is_armstrong", (370,), True),
            ("next_prime", (17,), 19),
        ]
        for operation, args, expected in test_cases:
            with self.subTest(operation=operation):
                result = getattr(self.calculator, operation)(*args)
                self.assertEqual(result, expected)

    def test_default_config_is_lenient(self):
        self.assertFalse(self.calculator.strict)
        self.assertEqual(self.calculator.factorial(21), 51090942171709440000)

    def test_strict_config(self):
        calculator = NumberTheoryCalculator(NumberTheoryConfig(strict_overflow=True))
        self.assertTrue(calculator.strict)
        with self.assertRaises(ArithmeticOverflowError):
            calculator.factorial(21)
        with self.assertRaises(ArithmeticOverflowError):
            calculator.fibonacci(47)
        with self.assertRaises(ArithmeticOverflowError):
            calculator.reverse_digits(1999999999)

    def test_errors_propagate(self):
        with self.assertRaises(InvalidArgumentError):
            self.calculator.factorial(-1)
        with self.assertRaises(DivisionByZeroError):
            self.calculator.lcm(0, 0)
        with self.assertRaises(TypeError):
            self.calculator.is_prime("13")

    def test_failures_are_logged(self):
        with self.assertLogs("number_theory_utils.calculator", level="WARNING") as logs:
            with self.assertRaises(InvalidArgumentError):
                self.calculator.is_armstrong(-5)
        self.assertIn("is_armstrong", logs.output[0])

    def test_calls_are_logged_at_debug(self):
        with self.assertLogs("number_theory_utils.calculator", level="DEBUG") as logs:
            self.calculator.gcd(56, 98)
        self.assertTrue(any("gcd(56, 98) = 14" in line for line in logs.output))

    def test_single_argument_call_logged_without_trailing_comma(self):
        with self.assertLogs("number_theory_utils.calculator", level="DEBUG") as logs:
            self.calculator.is_prime(13)
        self.assertTrue(any(line.endswith("is_prime(13) = True") for line in logs.output))
        self.assertFalse(any("(13,)" in line for line in logs.output))


class TestINumberTheoryCalculator(unittest.TestCase):
    """
    Tests for the INumberTheoryCalculator interface, using a mock to check
    the contract.
    """

    def setUp(self):
        self.mock_calculator = Mock(spec=INumberTheoryCalculator)

    def test_gcd_called_correctly(self):
        self.mock_calculator.gcd.return_value = 14
        result = self.mock_calculator.gcd(56, 98)
        self.mock_calculator.gcd.assert_called_once_with(56, 98)
        self.assertEqual(result, 14)

    def test_interface_cannot_be_instantiated(self):
        with self.assertRaises(TypeError):
            INumberTheoryCalculator()

    def test_interface_declares_all_operations(self):
        for name in (
            "is_prime", "gcd", "lcm", "fibonacci", "factorial",
            "is_perfect", "digit_sum", "reverse_digits", "is_armstrong", "next_prime",
        ):
            with self.subTest(name=name):
                self.assertIn(name, INumberTheoryCalculator.__abstractmethods__)


if __name__ == '__main__':
    unittest.main()
