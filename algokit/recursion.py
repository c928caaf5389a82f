"""Recursive exercises on numbers and sequences."""

from __future__ import annotations

import functools
import math
from collections.abc import Sequence
from itertools import pairwise, repeat
from typing import Any

_DIGIT_NAMES = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_DIGITS = frozenset("0123456789")
_DICE_FACES = 6


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def factorial(n: int) -> int:
    """Return ``n!``."""
    _require_non_negative(n, "n")
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th term of the sequence that starts 1, 1, 2, 3, ..."""
    _require_non_negative(n, "n")
    current, following = 1, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent`` by repeated multiplication."""
    _require_non_negative(exponent, "exponent")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fast_power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent`` by repeated squaring."""
    _require_non_negative(exponent, "exponent")

    def raise_to(p: int) -> int:
        if p == 0:
            return 1
        half = raise_to(p // 2)
        full = half * half
        return full * base if p & 1 else full

    return raise_to(exponent)


def multiply(n: int, times: int) -> int:
    """Multiply ``n`` by ``times`` through repeated addition."""
    _require_non_negative(times, "times")
    return sum(repeat(n, times))


def count_down(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    _require_non_negative(n, "n")
    return list(range(n, 0, -1))


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 up to ``n``."""
    _require_non_negative(n, "n")
    return list(range(1, n + 1))


def count_board_paths(start: int, end: int) -> int:
    """Count the sequences of die throws (1 to 6) that lead from ``start`` exactly to ``end``."""
    if start > end:
        return 0
    span = end - start
    ways = [0] * (span + _DICE_FACES + 1)
    ways[span] = 1
    for offset in reversed(range(span)):
        ways[offset] = sum(ways[offset + 1:offset + 1 + _DICE_FACES])
    return ways[0]


def min_perfect_squares(n: int) -> int:
    """Return the fewest perfect squares that add up to ``n``; 0 for ``n <= 0``."""
    if n <= 0:
        return 0
    best = [0] * (n + 1)
    for m in range(1, n + 1):
        best[m] = 1 + min(best[m - k * k] for k in range(1, math.isqrt(m) + 1))
    return best[n]


def reduce_to_one(n: int) -> int:
    """Return the fewest steps that bring ``n`` down to 1.

    A step either halves an even number or subtracts one.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    steps = [0] * (n + 1)
    for m in range(2, n + 1):
        count = steps[m - 1] + 1
        if m % 2 == 0:
            count = min(count, steps[m // 2] + 1)
        steps[m] = count
    return steps[n]


def tiling_ways(n: int) -> int:
    """Count the ways to tile a 2 by ``n`` strip with 2 by 1 tiles."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def can_partition_equal(values: Sequence[int]) -> bool:
    """Tell whether ``values`` split into two parts with equal sums."""
    total = sum(values)
    if total % 2:
        return False
    sums = {0}
    for value in values:
        sums |= {s + value for s in sums}
    return total // 2 in sums


def spell_digits(n: int) -> list[str]:
    """Return the English name of each decimal digit of ``n``; empty for 0."""
    _require_non_negative(n, "n")
    if n == 0:
        return []
    return [_DIGIT_NAMES[int(digit)] for digit in str(n)]


def string_to_int(text: str) -> int:
    """Read a non-empty string of decimal digits as a number."""
    if not text or not set(text) <= _DIGITS:
        raise ValueError(f"not a string of decimal digits: {text!r}")
    return functools.reduce(lambda acc, ch: acc * 10 + int(ch), text, 0)


def is_sorted(values: Sequence[Any]) -> bool:
    """Tell whether ``values`` are in strictly increasing order."""
    return all(a < b for a, b in pairwise(values))


def linear_search(values: Sequence[Any], key: Any) -> bool:
    """Tell whether ``key`` occurs in ``values``, scanning from the front."""
    return any(value == key for value in values)


def binary_search(values: Sequence[Any], key: Any) -> bool:
    """Tell whether ``key`` occurs in the ascending sequence ``values``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return True
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return False