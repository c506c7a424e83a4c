"""
Intro component - beginner helpers used by the first test drills.
"""

from __future__ import annotations

import math
from collections.abc import Sequence


def max_of(a: float, b: float) -> float:
    """Return the larger argument; `a` wins ties."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_avg(values: Sequence[float]) -> float:
    """Arithmetic mean. An empty sequence has no mean and yields NaN."""
    if not values:
        return math.nan
    return sum(values) / len(values)


def factorial(n: int) -> int | None:
    """n! for non-negative n; None for negative input."""
    if n < 0:
        return None
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result
