"""Classic comparison sorts.

Every function takes any iterable of mutually comparable items and returns a
new ascending list. The input is never modified.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping neighbours, stopping early once a pass makes no swap."""
    a = list(values)
    n = len(a)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if a[j + 1] < a[j]:
                a[j], a[j + 1] = a[j + 1], a[j]
                swapped = True
        if not swapped:
            break
    return a


def recursive_bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by neighbour swaps, shrinking the unsorted part by one after every full pass."""
    a = list(values)
    for end in range(len(a) - 1, 0, -1):
        for j in range(end):
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]
    return a


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    a = list(values)
    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        while j >= 0 and a[j] > key:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = key
    return a


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front of the unsorted part."""
    a = list(values)
    n = len(a)
    for i in range(n):
        smallest = min(range(i, n), key=a.__getitem__)
        if smallest != i:
            a[i], a[smallest] = a[smallest], a[i]
    return a


def _sift_down(a: list[Any], root: int, size: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and a[left] > a[largest]:
            largest = left
        if right < size and a[right] > a[largest]:
            largest = right
        if largest == root:
            return
        a[root], a[largest] = a[largest], a[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    a = list(values)
    n = len(a)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(a, i, n)
    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        _sift_down(a, 0, end)
    return a


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in half, sorting each half and merging them."""
    a = list(values)
    if len(a) < 2:
        return a
    mid = (len(a) + 1) // 2
    return _merge(merge_sort(a[:mid]), merge_sort(a[mid:]))


def bottom_up_merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by merging neighbouring runs whose width doubles on every pass."""
    a = list(values)
    width = 1
    while width < len(a):
        a = [
            item
            for start in range(0, len(a), 2 * width)
            for item in _merge(a[start:start + width], a[start + width:start + 2 * width])
        ]
        width *= 2
    return a


def _partition(a: list[Any], lb: int, ub: int) -> int:
    """Partition ``a[lb..ub]`` around its first item and return the pivot's final index."""
    pivot = a[lb]
    i, j = lb, ub + 1
    while True:
        i += 1
        while i <= ub and a[i] < pivot:
            i += 1
        j -= 1
        while a[j] > pivot:
            j -= 1
        if i >= j:
            break
        a[i], a[j] = a[j], a[i]
    a[lb], a[j] = a[j], a[lb]
    return j


def _quick_sort(a: list[Any], rng: random.Random | None) -> list[Any]:
    pending = [(0, len(a) - 1)]
    while pending:
        lb, ub = pending.pop()
        if lb >= ub:
            continue
        if rng is not None:
            t = rng.randrange(lb, ub)
            a[lb], a[t] = a[t], a[lb]
        p = _partition(a, lb, ub)
        pending.append((lb, p - 1))
        pending.append((p + 1, ub))
    return a


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first item of each range."""
    return _quick_sort(list(values), None)


def randomized_quick_sort(values: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Sort like :func:`quick_sort`, first swapping a random item of each range to its front.

    The pivot is drawn from every position of the range except the last.
    """
    return _quick_sort(list(values), rng if rng is not None else random.Random())