"""
Intro component unit tests.
"""

from __future__ import annotations

import math

import pytest

from kata.components.intro import calculate_avg, factorial, fizz_buzz, max_of


class TestMaxOf:
    def test_returns_first_when_greater(self) -> None:
        # Arrange
        a = 2
        b = 1

        # Act
        result = max_of(a, b)

        # Assert
        assert result == 2

    def test_returns_second_when_greater(self) -> None:
        assert max_of(1, 2) == 2

    def test_returns_first_when_equal(self) -> None:
        assert max_of(1, 1) == 1


class TestFizzBuzz:
    def test_divisible_by_three_and_five(self) -> None:
        assert fizz_buzz(15) == "FizzBuzz"

    def test_divisible_by_three(self) -> None:
        assert fizz_buzz(6) == "Fizz"

    def test_divisible_by_five(self) -> None:
        assert fizz_buzz(10) == "Buzz"

    def test_other_numbers_are_echoed(self) -> None:
        assert fizz_buzz(7) == "7"


class TestCalculateAvg:
    def test_empty_sequence_is_nan(self) -> None:
        assert math.isnan(calculate_avg([]))

    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ([1], 1),
            ([1, 2], 1.5),
            ([1, 2, 3], 2),
        ],
    )
    def test_average(self, values: list[float], expected: float) -> None:
        assert calculate_avg(values) == expected


class TestFactorial:
    @pytest.mark.parametrize(
        ("n", "expected"),
        [(0, 1), (1, 1), (2, 2), (3, 6), (4, 24)],
    )
    def test_factorial(self, n: int, expected: int) -> None:
        assert factorial(n) == expected

    def test_negative_returns_none(self) -> None:
        assert factorial(-4) is None
