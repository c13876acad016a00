"""
Demonstration run of the number theory operations.

Evaluates every operation on a literal sample and prints the results.

Usage
-----
    python -m number_theory_utils
"""

import sys
from typing import List, Optional

from .container import Container
from .exceptions import NumberTheoryError
from .interfaces import INumberTheoryCalculator
from .logging_config import setup_logging
from .models import OperationResult

# (operation, arguments, expected)
SAMPLES = [
    ("is_prime", [13], True),
    ("gcd", [56, 98], 14),
    ("lcm", [8, 12], 24),
    ("fibonacci", [10], 55),
    ("factorial", [6], 720),
    ("is_perfect", [496], True),
    ("digit_sum", [9876], 30),
    ("reverse_digits", [1234], 4321),
    ("is_armstrong", [370], True),
    ("next_prime", [17], 19),
]


def run_demo(calculator: INumberTheoryCalculator) -> List[OperationResult]:
    """Evaluate every sample on the calculator.

    Returns:
        List[OperationResult]: One result per sample, in order.
    """
    results = []
    for operation, arguments, expected in SAMPLES:
        value = getattr(calculator, operation)(*arguments)
        results.append(OperationResult(
            operation=operation,
            arguments=arguments,
            result=value,
            expected=expected,
        ))
    return results


def main(container: Optional[Container] = None) -> int:
    """Run the demonstration and print one line per operation."""
    container = container or Container()
    logger = setup_logging("number_theory_utils", container.config())
    calculator = container.calculator()

    try:
        results = run_demo(calculator)
    except NumberTheoryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for item in results:
        marker = "ok" if item.matches_expected else f"expected {item.expected}"
        print(f"{item.describe()} [{marker}]")

    failed = [item for item in results if not item.matches_expected]
    if failed:
        logger.error("%d of %d samples did not match", len(failed), len(results))
        return 1
    logger.info("All %d samples matched", len(results))
    return 0
