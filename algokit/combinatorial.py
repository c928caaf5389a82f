"""Backtracking over permutations, subsets, colourings and cycles."""

from __future__ import annotations

from collections.abc import Sequence


def _size_of_square(graph: Sequence[Sequence[int]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def permutations(text: str) -> list[str]:
    """Return every ordering of the characters of ``text``, repeats included.

    Each position is filled with the remaining characters in their order.
    """
    if not text:
        return [""]
    return [
        ch + rest
        for i, ch in enumerate(text)
        for rest in permutations(text[:i] + text[i + 1:])
    ]


def hamiltonian_cycle(graph: Sequence[Sequence[int]], start: int = 0) -> list[int] | None:
    """Find a cycle through every vertex, given as vertices ending back at ``start``.

    ``graph`` is an adjacency matrix. Vertices are tried in increasing order;
    ``None`` means there is no such cycle.
    """
    size = _size_of_square(graph)
    if not 0 <= start < size:
        raise ValueError("start vertex out of range")
    path = [start]
    on_path = {start}

    def extend() -> bool:
        last = path[-1]
        if len(path) == size:
            return bool(graph[last][start])
        for vertex in range(size):
            if graph[last][vertex] and vertex not in on_path:
                path.append(vertex)
                on_path.add(vertex)
                if extend():
                    return True
                path.pop()
                on_path.discard(vertex)
        return False

    return path + [start] if extend() else None


def m_coloring(graph: Sequence[Sequence[int]], colors: int) -> list[int] | None:
    """Colour the vertices with colours 1 to ``colors`` so no edge joins equal colours.

    Returns the colour of each vertex, or ``None`` when it cannot be done.
    """
    if colors < 0:
        raise ValueError("number of colours must not be negative")
    size = _size_of_square(graph)
    coloring = [0] * size

    def is_safe(vertex: int, color: int) -> bool:
        return not any(
            edge and coloring[other] == color for other, edge in enumerate(graph[vertex])
        )

    def assign(vertex: int) -> bool:
        if vertex == size:
            return True
        for color in range(1, colors + 1):
            if is_safe(vertex, color):
                coloring[vertex] = color
                if assign(vertex + 1):
                    return True
                coloring[vertex] = 0
        return False

    return coloring if assign(0) else None


def minimum_partition(values: Sequence[int]) -> int:
    """Return the smallest difference between the sums of two parts of ``values``."""
    sums = {0}
    for value in values:
        sums |= {s + value for s in sums}
    total = sum(values)
    return min(abs(total - 2 * s) for s in sums)


def subsets_with_sum(values: Sequence[int], target: int) -> list[list[int]]:
    """List the subsets of ``values`` adding up to ``target``, in search order.

    Each element is first taken, then left out. A running total that meets
    the target ends that branch; one that exceeds it is abandoned.
    """
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(index: int, total: int) -> None:
        if total == target:
            found.append(chosen[:])
            return
        if total > target or index == len(values):
            return
        chosen.append(values[index])
        search(index + 1, total + values[index])
        chosen.pop()
        search(index + 1, total)

    search(0, 0)
    return found


def _half_toward_zero(total: int) -> int:
    return total // 2 if total >= 0 else -(-total // 2)


def tug_of_war(values: Sequence[int]) -> tuple[list[int], list[int]]:
    """Split ``values`` into a team of ``len(values) // 2`` and the rest.

    The first team's sum is as close as possible to half the total (halved
    toward zero); on ties the first team found wins. Both teams keep the
    input order.
    """
    n = len(values)
    team_size = n // 2
    half = _half_toward_zero(sum(values))
    current = [False] * n
    best_diff: int | None = None
    best = [False] * n

    def search(position: int, selected: int, running: int) -> None:
        nonlocal best_diff, best
        if position == n:
            return
        if team_size - selected > n - position:
            return
        search(position + 1, selected, running)
        selected += 1
        running += values[position]
        current[position] = True
        if selected == team_size:
            diff = abs(half - running)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best = current[:]
        else:
            search(position + 1, selected, running)
        current[position] = False

    search(0, 0, 0)
    first = [value for value, taken in zip(values, best) if taken]
    second = [value for value, taken in zip(values, best) if not taken]
    return first, second