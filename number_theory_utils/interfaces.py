"""
Number Theory Calculator Interface

This module defines the abstract interface for the number theory operations.
It provides a contract that concrete calculators must follow.
"""

from abc import ABC, abstractmethod


class INumberTheoryCalculator(ABC):
    """
    Abstract interface for elementary number theory computations.

    Implementations must be stateless with respect to their inputs: every
    method is a pure function of its arguments.
    """

    @abstractmethod
    def is_prime(self, n: int) -> bool:
        """Return True if n is prime. Values below 2 are never prime."""
        pass

    @abstractmethod
    def gcd(self, x: int, y: int) -> int:
        """
        Compute the greatest common divisor of x and y.

        Returns:
            int: A non-negative divisor; gcd(0, 0) is 0.
        """
        pass

    @abstractmethod
    def lcm(self, x: int, y: int) -> int:
        """
        Compute the least common multiple of x and y.

        Raises:
            DivisionByZeroError: If both x and y are zero.
        """
        pass

    @abstractmethod
    def fibonacci(self, n: int) -> int:
        """
        Return the n-th Fibonacci number.

        Raises:
            InvalidArgumentError: If n is negative.
        """
        pass

    @abstractmethod
    def factorial(self, n: int) -> int:
        """
        Compute n! for a non-negative integer.

        Raises:
            InvalidArgumentError: If n is negative.
        """
        pass

    @abstractmethod
    def is_perfect(self, n: int) -> bool:
        """Return True if n equals the sum of its proper divisors."""
        pass

    @abstractmethod
    def digit_sum(self, n: int) -> int:
        """Return the sum of the decimal digits of abs(n)."""
        pass

    @abstractmethod
    def reverse_digits(self, n: int) -> int:
        """Return n with its decimal digits reversed, sign preserved."""
        pass

    @abstractmethod
    def is_armstrong(self, n: int) -> bool:
        """
        Return True if n is an Armstrong number.

        Raises:
            InvalidArgumentError: If n is negative.
        """
        pass

    @abstractmethod
    def next_prime(self, n: int) -> int:
        """Return the smallest prime strictly greater than n."""
        pass
