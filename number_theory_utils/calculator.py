"""
Number Theory Calculator Implementation

This module contains NumberTheoryCalculator, the concrete implementation of
INumberTheoryCalculator. It delegates to the pure functions in
``operations`` and applies the strict overflow policy from its config.
"""

import logging
from typing import Callable, Optional, TypeVar

from . import operations
from .config import NumberTheoryConfig
from .exceptions import NumberTheoryError
from .interfaces import INumberTheoryCalculator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NumberTheoryCalculator(INumberTheoryCalculator):
    """
    Stateless calculator for elementary number theory operations.

    The only value held by an instance is its frozen config, so a single
    instance can be shared freely between callers and threads.

    Examples:
        >>> calculator = NumberTheoryCalculator()
        >>> calculator.gcd(56, 98)
        14
        >>> calculator.next_prime(17)
        19
    """

    def __init__(self, config: Optional[NumberTheoryConfig] = None):
        self.config = config or NumberTheoryConfig()

    @property
    def strict(self) -> bool:
        return self.config.strict_overflow

    def _run(self, name: str, func: Callable[..., T], *args, **kwargs) -> T:
        call = f"{name}({', '.join(repr(a) for a in args)})"
        logger.debug("Computing %s", call)
        try:
            result = func(*args, **kwargs)
        except (NumberTheoryError, TypeError) as e:
            logger.warning("%s failed: %s", call, e)
            raise
        logger.debug("%s = %s", call, result)
        return result

    def is_prime(self, n: int) -> bool:
        return self._run("is_prime", operations.is_prime, n)

    def gcd(self, x: int, y: int) -> int:
        return self._run("gcd", operations.gcd, x, y)

    def lcm(self, x: int, y: int) -> int:
        return self._run("lcm", operations.lcm, x, y)

    def fibonacci(self, n: int) -> int:
        return self._run("fibonacci", operations.fibonacci, n, strict=self.strict)

    def factorial(self, n: int) -> int:
        return self._run("factorial", operations.factorial, n, strict=self.strict)

    def is_perfect(self, n: int) -> bool:
        return self._run("is_perfect", operations.is_perfect, n)

    def digit_sum(self, n: int) -> int:
        return self._run("digit_sum", operations.digit_sum, n)

    def reverse_digits(self, n: int) -> int:
        return self._run("reverse_digits", operations.reverse_digits, n, strict=self.strict)

    def is_armstrong(self, n: int) -> bool:
        return self._run("is_armstrong", operations.is_armstrong, n)

    def next_prime(self, n: int) -> int:
        return self._run("next_prime", operations.next_prime, n)
