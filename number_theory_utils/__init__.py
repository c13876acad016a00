"""
Number Theory Utils

This package provides elementary number theory operations on single integers:
primality, GCD/LCM, Fibonacci numbers, factorials, perfect and Armstrong
numbers, digit sums, digit reversal and next-prime search.

The operations are plain functions; NumberTheoryCalculator wraps them behind
the INumberTheoryCalculator interface for dependency injection.
"""

from .operations import (
    is_prime,
    gcd,
    lcm,
    fibonacci,
    factorial,
    is_perfect,
    digit_sum,
    reverse_digits,
    is_armstrong,
    next_prime,
)
from .exceptions import (
    NumberTheoryError,
    InvalidArgumentError,
    DivisionByZeroError,
    ArithmeticOverflowError,
)
from .interfaces import INumberTheoryCalculator
from .calculator import NumberTheoryCalculator
from .config import NumberTheoryConfig
from .models import OperationResult

__all__ = [
    "is_prime",
    "gcd",
    "lcm",
    "fibonacci",
    "factorial",
    "is_perfect",
    "digit_sum",
    "reverse_digits",
    "is_armstrong",
    "next_prime",
    "NumberTheoryError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
    "INumberTheoryCalculator",
    "NumberTheoryCalculator",
    "NumberTheoryConfig",
    "OperationResult",
]
