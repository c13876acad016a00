"""
Elementary number theory operations.

Every function here is pure and stateless: it takes one or two integers and
returns a bool or an int. Python integers never wrap, so results are exact;
the fixed-width ranges the operations were originally specified against are
only enforced when ``strict=True`` is passed to the operations that accept
it.

Sign conventions:
    - ``gcd`` always returns a non-negative value, ``gcd(0, 0) == 0``.
    - ``lcm(0, 0)`` raises ``DivisionByZeroError``.
    - ``digit_sum`` sums the digits of ``abs(n)``.
    - ``reverse_digits`` keeps the sign of ``n``.
"""

import math

from .exceptions import ArithmeticOverflowError, DivisionByZeroError, InvalidArgumentError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MAX = 2 ** 63 - 1

# Largest arguments whose results fit the ranges above
FIBONACCI_INT32_MAX_INDEX = 46
FACTORIAL_INT64_MAX_ARGUMENT = 20


def _require_int(value, name: str = "n") -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer for '{name}', got {type(value).__name__}")


def _require_non_negative(operation: str, n: int) -> None:
    _require_int(n)
    if n < 0:
        raise InvalidArgumentError(operation, n)


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime.

    Trial division by every integer from 2 up to and including isqrt(n).
    Anything below 2 is not prime.

    Examples:
        >>> is_prime(13)
        True
        >>> is_prime(1)
        False
    """
    _require_int(n)
    if n < 2:
        return False
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def gcd(x: int, y: int) -> int:
    """Greatest common divisor by the iterative Euclidean algorithm.

    The algorithm runs on absolute values, so the result is never negative.

    Examples:
        >>> gcd(56, 98)
        14
        >>> gcd(-4, 6)
        2
    """
    _require_int(x, "x")
    _require_int(y, "y")
    x, y = abs(x), abs(y)
    while y != 0:
        x, y = y, x % y
    return x


def lcm(x: int, y: int) -> int:
    """Least common multiple, ``abs(x * y) // gcd(x, y)``.

    Raises:
        DivisionByZeroError: If both arguments are zero.

    Examples:
        >>> lcm(8, 12)
        24
    """
    divisor = gcd(x, y)
    if divisor == 0:
        raise DivisionByZeroError("lcm")
    return abs(x * y) // divisor


def fibonacci(n: int, strict: bool = False) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1.

    Args:
        n: Index in the sequence, must be >= 0.
        strict: Raise when the result does not fit a signed 32-bit integer.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
        ArithmeticOverflowError: In strict mode, for n > 46.
    """
    _require_non_negative("fibonacci", n)
    if strict and n > FIBONACCI_INT32_MAX_INDEX:
        raise ArithmeticOverflowError("fibonacci", n, INT32_MAX)
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def factorial(n: int, strict: bool = False) -> int:
    """Return n! for a non-negative integer ``n``.

    Args:
        n: Must be >= 0. ``factorial(0) == factorial(1) == 1``.
        strict: Raise when the result does not fit a signed 64-bit integer.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
        ArithmeticOverflowError: In strict mode, for n > 20.
    """
    _require_non_negative("factorial", n)
    if strict and n > FACTORIAL_INT64_MAX_ARGUMENT:
        raise ArithmeticOverflowError("factorial", n, INT64_MAX)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def is_perfect(n: int) -> bool:
    """Return True if ``n`` equals the sum of its proper divisors.

    Divisors are collected in pairs (i, n // i) up to isqrt(n); a square
    root divisor is counted once. Values below 2 are never perfect.
    """
    _require_int(n)
    if n < 2:
        return False
    divisor_sum = 1
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            divisor_sum += i
            if i != n // i:
                divisor_sum += n // i
    return divisor_sum == n


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``abs(n)``."""
    _require_int(n)
    n = abs(n)
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def reverse_digits(n: int, strict: bool = False) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign.

    Trailing zeros are lost: ``reverse_digits(120) == 21``.

    Args:
        n: Any integer.
        strict: Raise when the reversed value leaves the signed 32-bit range.

    Raises:
        ArithmeticOverflowError: In strict mode, on a 32-bit overflow.
    """
    _require_int(n)
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    reversed_value = 0
    while remaining != 0:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    reversed_value *= sign
    if strict and not INT32_MIN <= reversed_value <= INT32_MAX:
        limit = INT32_MIN if reversed_value < 0 else INT32_MAX
        raise ArithmeticOverflowError("reverse_digits", n, limit)
    return reversed_value


def is_armstrong(n: int) -> bool:
    """Return True if ``n`` equals the sum of its digits raised to the digit count.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    _require_non_negative("is_armstrong", n)
    digit_count = len(str(n))
    total = 0
    remaining = n
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        total += digit ** digit_count
    return total == n


def next_prime(n: int) -> int:
    """Return the smallest prime strictly greater than ``n``.

    The search has no upper bound.
    """
    _require_int(n)
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MAX",
    "FIBONACCI_INT32_MAX_INDEX",
    "FACTORIAL_INT64_MAX_ARGUMENT",
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
]
