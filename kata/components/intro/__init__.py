"""
Intro component - max, FizzBuzz, average and factorial helpers.
"""

from .component import (
    calculate_avg,
    factorial,
    fizz_buzz,
    max_of,
)

__all__ = [
    "calculate_avg",
    "factorial",
    "fizz_buzz",
    "max_of",
]
