"""Backtracking searches on square boards and grids.

Covers the knight's tour, the N-queens puzzle, sudoku and the rat in a maze
that only moves right or down.
"""

from __future__ import annotations

import functools
import math
from collections.abc import Sequence

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))
_MAX_KNIGHT_BOARD = 8
_WALL = "X"


def knight_tour(n: int) -> list[list[int]] | None:
    """Find a knight's tour of an ``n`` by ``n`` board starting in the top-left corner.

    The board holds the move number (starting at 1) of every square, or the
    result is ``None`` when no tour is found. On boards smaller than 8 only
    the first ``n`` of the eight knight moves are tried.
    """
    if not 1 <= n <= _MAX_KNIGHT_BOARD:
        raise ValueError(f"board size must be between 1 and {_MAX_KNIGHT_BOARD}")
    board = [[0] * n for _ in range(n)]
    board[0][0] = 1
    moves = _KNIGHT_MOVES[:n]

    def place(move: int, row: int, col: int) -> bool:
        if move == n * n:
            return True
        for d_row, d_col in moves:
            r, c = row + d_row, col + d_col
            if 0 <= r < n and 0 <= c < n and board[r][c] == 0:
                board[r][c] = move + 1
                if place(move + 1, r, c):
                    return True
                board[r][c] = 0
        return False

    return board if place(1, 0, 0) else None


def format_knight_board(board: Sequence[Sequence[int]]) -> str:
    """Render a tour with every move number right-aligned in three columns."""
    return "".join("".join(f"{cell:>3} " for cell in row) + "\n" for row in board)


def n_queens(n: int) -> list[list[bool]] | None:
    """Place ``n`` non-attacking queens row by row; ``True`` marks a queen."""
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[False] * n for _ in range(n)]

    def is_safe(row: int, col: int) -> bool:
        if any(board[r][col] for r in range(row)):
            return False
        if any(board[r][c] for r, c in zip(range(row, -1, -1), range(col, -1, -1))):
            return False
        return not any(board[r][c] for r, c in zip(range(row, -1, -1), range(col, n)))

    def solve(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if is_safe(row, col):
                board[row][col] = True
                if solve(row + 1):
                    return True
                board[row][col] = False
        return False

    return board if solve(0) else None


def format_queens(board: Sequence[Sequence[bool]]) -> str:
    """Render a queens board with ``Q`` for a queen and ``_`` for an empty square."""
    return "".join("".join("Q " if cell else "_ " for cell in row) + "\n" for row in board)


def count_n_queens(n: int) -> int:
    """Count every way of placing ``n`` non-attacking queens on an ``n`` by ``n`` board."""
    if n < 0:
        raise ValueError("board size must not be negative")

    def solve(row: int, cols: int, diag: int, anti: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            c_bit = 1 << col
            d_bit = 1 << (row - col + n - 1)
            a_bit = 1 << (row + col)
            if not (cols & c_bit or diag & d_bit or anti & a_bit):
                total += solve(row + 1, cols | c_bit, diag | d_bit, anti | a_bit)
        return total

    return solve(0, 0, 0, 0)


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the zeros of a square sudoku grid, returning a new grid or ``None``.

    The side of the grid must be a perfect square; its boxes have the square
    root of that side. Cells are filled in row order with the smallest
    number that fits. The given grid is left untouched.
    """
    mat = [list(row) for row in grid]
    n = len(mat)
    if any(len(row) != n for row in mat):
        raise ValueError("sudoku grid must be square")
    box = math.isqrt(n)
    if box * box != n:
        raise ValueError("sudoku side must be a perfect square")
    if any(not 0 <= value <= n for row in mat for value in row):
        raise ValueError(f"sudoku cells must hold values from 0 to {n}")

    empty = [(r, c) for r, row in enumerate(mat) for c, value in enumerate(row) if value == 0]

    def can_place(row: int, col: int, number: int) -> bool:
        if any(mat[x][col] == number or mat[row][x] == number for x in range(n)):
            return False
        top, left = (row // box) * box, (col // box) * box
        return all(
            mat[x][y] != number for x in range(top, top + box) for y in range(left, left + box)
        )

    def fill(k: int) -> bool:
        if k == len(empty):
            return True
        row, col = empty[k]
        for number in range(1, n + 1):
            if can_place(row, col, number):
                mat[row][col] = number
                if fill(k + 1):
                    return True
        mat[row][col] = 0
        return False

    return mat if fill(0) else None


def _maze_grid(maze: Sequence[Sequence[str]]) -> list[list[str]]:
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        raise ValueError("maze must have at least one cell")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("maze rows must all have the same length")
    return grid


def maze_reachable(maze: Sequence[Sequence[str]]) -> bool:
    """Tell whether the bottom-right cell can be reached from the top-left.

    Moves go right or down only and ``X`` marks a wall. The target cell
    counts as reached even when it is a wall itself.
    """
    grid = _maze_grid(maze)
    end_row, end_col = len(grid) - 1, len(grid[0]) - 1

    @functools.cache
    def reach(row: int, col: int) -> bool:
        if row == end_row and col == end_col:
            return True
        if row > end_row or col > end_col:
            return False
        if grid[row][col] == _WALL:
            return False
        return reach(row, col + 1) or reach(row + 1, col)

    return reach(0, 0)


def rat_in_maze_path(maze: Sequence[Sequence[str]]) -> list[list[list[int]]]:
    """Return every right-or-down path through the maze as a grid of 0s and 1s.

    Paths are listed in the order found, trying right before down; the list
    is empty when the bottom-right cell cannot be reached.
    """
    grid = _maze_grid(maze)
    end_row, end_col = len(grid) - 1, len(grid[0]) - 1
    solution = [[0] * len(grid[0]) for _ in grid]
    found: list[list[list[int]]] = []

    def walk(row: int, col: int) -> None:
        if row == end_row and col == end_col:
            solution[end_row][end_col] = 1
            found.append([line[:] for line in solution])
            return
        if row > end_row or col > end_col or grid[row][col] == _WALL:
            return
        solution[row][col] = 1
        walk(row, col + 1)
        walk(row + 1, col)
        solution[row][col] = 0

    walk(0, 0)
    return found