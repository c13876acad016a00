"""Exceptions raised by the number theory operations."""

from typing import Optional


class NumberTheoryError(Exception):
    """Base class for all number theory errors."""


class InvalidArgumentError(NumberTheoryError, ValueError):
    """Raised when an argument is outside the operation's numeric domain.

    Attributes:
        operation (str): Name of the operation that rejected the value.
        value (int): The rejected value.
    """

    def __init__(self, operation: str, value: int, message: Optional[str] = None):
        self.operation = operation
        self.value = value
        super().__init__(message or f"{operation}() is undefined for negative integers, got {value}")


class DivisionByZeroError(NumberTheoryError, ZeroDivisionError):
    """Raised when an operation would divide by a zero GCD."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        super().__init__(message or f"{operation}() is undefined when both arguments are zero")


class ArithmeticOverflowError(NumberTheoryError, OverflowError):
    """Raised in strict mode when a result leaves its fixed-width range.

    Attributes:
        operation (str): Name of the operation.
        value (int): The argument that produced the oversized result.
        limit (int): The bound that was exceeded.
    """

    def __init__(self, operation: str, value: int, limit: int):
        self.operation = operation
        self.value = value
        self.limit = limit
        super().__init__(f"{operation}({value}) exceeds the fixed-width limit {limit}")


__all__ = [
    "NumberTheoryError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
]
