import pytest

from algokit.board_search import (
    count_n_queens,
    format_knight_board,
    format_queens,
    knight_tour,
    maze_reachable,
    n_queens,
    rat_in_maze_path,
    solve_sudoku,
)

SUDOKU = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

MAZE = ["0000", "00X0", "000X", "0X00"]


def _queens_are_safe(board):
    queens = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]
    for i, (r1, c1) in enumerate(queens):
        for r2, c2 in queens[i + 1:]:
            if c1 == c2 or r1 == r2 or abs(r1 - r2) == abs(c1 - c2):
                return False
    return True


def test_knight_tour_single_square():
    assert knight_tour(1) == [[1]]


@pytest.mark.parametrize("n", [2, 3, 4])
def test_knight_tour_impossible_boards(n):
    assert knight_tour(n) is None


@pytest.mark.parametrize("n", [0, 9])
def test_knight_tour_rejects_bad_size(n):
    with pytest.raises(ValueError):
        knight_tour(n)


def test_format_knight_board():
    assert format_knight_board([[1, 10], [3, 4]]) == "  1  10 \n  3   4 \n"


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_n_queens_places_safe_queens(n):
    board = n_queens(n)
    assert len(board) == n
    assert all(sum(row) == 1 for row in board)
    assert _queens_are_safe(board)


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_without_solution(n):
    assert n_queens(n) is None


def test_format_queens():
    board = [[False, True], [True, False]]
    assert format_queens(board) == "_ Q \nQ _ \n"


def test_format_queens_of_solution_has_one_queen_per_row():
    lines = format_queens(n_queens(4)).splitlines()
    assert len(lines) == 4
    assert all(line.count("Q") == 1 for line in lines)


def test_count_n_queens_known_values():
    assert count_n_queens(4) == 2
    assert count_n_queens(8) == 92


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_count_agrees_with_single_solution(n):
    assert (count_n_queens(n) > 0) == (n_queens(n) is not None)


def test_queens_reject_negative():
    with pytest.raises(ValueError):
        n_queens(-1)
    with pytest.raises(ValueError):
        count_n_queens(-1)


def test_solve_sudoku_produces_valid_grid():
    solved = solve_sudoku(SUDOKU)
    digits = set(range(1, 10))
    assert all(set(row) == digits for row in solved)
    assert all({solved[r][c] for r in range(9)} == digits for c in range(9))
    for top in range(0, 9, 3):
        for left in range(0, 9, 3):
            box = {solved[r][c] for r in range(top, top + 3) for c in range(left, left + 3)}
            assert box == digits
    for r in range(9):
        for c in range(9):
            if SUDOKU[r][c]:
                assert solved[r][c] == SUDOKU[r][c]


def test_solve_sudoku_leaves_input_alone():
    grid = [row[:] for row in SUDOKU]
    solve_sudoku(grid)
    assert grid == SUDOKU


def test_solve_sudoku_single_cell():
    assert solve_sudoku([[0]]) == [[1]]


def test_solve_sudoku_unsolvable():
    grid = [[0, 2, 3, 4], [0, 0, 0, 0], [1, 0, 0, 0], [0, 0, 0, 0]]
    assert solve_sudoku(grid) is None


@pytest.mark.parametrize(
    "grid",
    [
        [[0, 0, 0], [0, 0, 0], [0, 0, 0]],
        [[0, 0], [0]],
        [[5, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]],
    ],
)
def test_solve_sudoku_rejects_bad_grids(grid):
    with pytest.raises(ValueError):
        solve_sudoku(grid)


def test_maze_reachable_source_maze():
    assert maze_reachable(["0000", "0000", "00X0", "0X00"]) is True


def test_maze_blocked():
    assert maze_reachable(["0X", "X0"]) is False
    assert maze_reachable(["X0", "00"]) is False


def test_maze_target_wall_still_counts():
    assert maze_reachable(["00", "0X"]) is True


def test_maze_rejects_empty_and_ragged():
    with pytest.raises(ValueError):
        maze_reachable([])
    with pytest.raises(ValueError):
        rat_in_maze_path(["00", "0"])


def test_rat_paths_open_two_by_two_order():
    assert rat_in_maze_path(["00", "00"]) == [[[1, 1], [0, 1]], [[1, 0], [1, 1]]]


def test_rat_paths_are_valid_monotone_paths():
    paths = rat_in_maze_path(MAZE)
    assert paths
    assert len({str(p) for p in paths}) == len(paths)
    for grid in paths:
        cells = [(r, c) for r in range(4) for c in range(4) if grid[r][c]]
        assert len(cells) == 7
        assert (0, 0) in cells and (3, 3) in cells
        assert all(MAZE[r][c] != "X" for r, c in cells)
        ordered = sorted(cells)
        for (r1, c1), (r2, c2) in zip(ordered, ordered[1:]):
            assert (r2 - r1, c2 - c1) in {(0, 1), (1, 0)}


@pytest.mark.parametrize("maze", [MAZE, ["0X", "X0"], ["00", "00"], ["0"]])
def test_rat_paths_agree_with_reachability(maze):
    assert bool(rat_in_maze_path(maze)) == maze_reachable(maze)