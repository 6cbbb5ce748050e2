"""Dice-roll probabilities and expected yield per number token."""

from __future__ import annotations

from collections.abc import Sequence

# Ways to roll each total with two six-sided dice (out of 36).  7 is listed
# for completeness but never produces resources.
_ROLL_WAYS: dict[int, int] = {
    2: 1,
    3: 2,
    4: 3,
    5: 4,
    6: 5,
    7: 6,
    8: 5,
    9: 4,
    10: 3,
    11: 2,
    12: 1,
}

_OUTCOMES = 36

# 6 and 8 are the most frequent producing numbers.
_BEST_NUMBER = 6


def roll_probability(number: int) -> float:
    """Return the probability of rolling number (0.0 outside 2-12)."""
    return _ROLL_WAYS.get(number, 0) / _OUTCOMES


def expected_yield(number: int) -> float:
    """Return how many times number is expected to come up in 36 rolls."""
    return float(_ROLL_WAYS.get(number, 0))


def pip_count(number: int) -> int:
    """Return the dots printed on a number token (0 for 7 and invalid values)."""
    if number == 7:
        return 0
    return _ROLL_WAYS.get(number, 0)


def number_quality(number: int) -> float:
    """Return the quality of a token in [0, 1]; 6 and 8 score 1.0, 2 and 12 0.2."""
    return expected_yield(number) / expected_yield(_BEST_NUMBER)


def average_number_quality(numbers: Sequence[int]) -> float:
    """Return the mean :func:`number_quality` of numbers, or 0.0 if empty."""
    if not numbers:
        return 0.0
    return sum(number_quality(n) for n in numbers) / len(numbers)
