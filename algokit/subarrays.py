"""Contiguous subarrays and their largest sum, by three methods."""

from __future__ import annotations

from collections.abc import Sequence


def subarrays(values: Sequence[int]) -> list[list[int]]:
    """List every contiguous run of at least two items, by start then end."""
    n = len(values)
    return [list(values[i:j + 1]) for i in range(n) for j in range(i + 1, n)]


def max_subarray_cubic(values: Sequence[int]) -> int:
    """Return the largest sum of a run of at least two items, summing each run afresh."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    return max(sum(run) for run in subarrays(values))


def max_subarray_quadratic(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty run, extending a running sum from each start."""
    if not values:
        raise ValueError("at least one value is needed")
    best = values[0]
    for i in range(len(values)):
        current = 0
        for value in values[i:]:
            current += value
            best = max(best, current)
    return best


def kadane(values: Sequence[int]) -> int:
    """Return the largest run sum found by Kadane's scan, never below 0."""
    current = 0
    best = 0
    for value in values:
        current = max(current + value, value)
        best = max(best, current)
    return best