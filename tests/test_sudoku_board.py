import random

import pytest

from gamebox.sudoku.board import GRID_SIZE, PREMADE_GRIDS, Board

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def nums(board):
    return [[t.num for t in row] for row in board.grid]


def test_load_locks_givens():
    board = Board(random.Random(0))
    board.load(PREMADE_GRIDS[0])
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            tile = board.grid[r][c]
            assert tile.num == PREMADE_GRIDS[0][r][c]
            assert tile.locked == (PREMADE_GRIDS[0][r][c] != 0)
            assert not tile.known


def test_load_copies_grid():
    board = Board(random.Random(0))
    grid = [row[:] for row in PREMADE_GRIDS[0]]
    board.load(grid)
    grid[0][0] = 1
    assert board.grid[0][0].num == PREMADE_GRIDS[0][0][0]


@pytest.mark.parametrize("seed", range(6))
def test_reset_picks_a_premade_grid(seed):
    board = Board(random.Random(seed))
    assert nums(board) in PREMADE_GRIDS


def test_load_rejects_wrong_shape():
    board = Board(random.Random(0))
    with pytest.raises(ValueError):
        board.load([[0] * GRID_SIZE] * (GRID_SIZE - 1))
    with pytest.raises(ValueError):
        board.load([[0] * (GRID_SIZE + 1)] * GRID_SIZE)


def test_clear_touches_only_unlocked_tiles():
    board = Board(random.Random(0))
    board.load(PREMADE_GRIDS[0])
    board.clear(5)
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            given = PREMADE_GRIDS[0][r][c]
            assert board.grid[r][c].num == (given if given else 5)


def test_set_writes_unlocked_and_ignores_locked():
    board = Board(random.Random(0))
    board.load(PREMADE_GRIDS[0])
    assert board.set(0, 0, 9) is False
    assert board.grid[0][0].num == PREMADE_GRIDS[0][0][0]
    assert board.set(0, 2, 4) is True
    assert board.grid[0][2].num == 4
    assert board.set(0, 2, 0) is True
    assert board.grid[0][2].num == 0


def test_set_rejects_bad_number_and_position():
    board = Board(random.Random(0))
    with pytest.raises(ValueError):
        board.set(0, 0, GRID_SIZE + 1)
    with pytest.raises(ValueError):
        board.set(0, 0, -1)
    with pytest.raises(IndexError):
        board.set(GRID_SIZE, 0, 1)


def test_solution_is_solved():
    board = Board(random.Random(0))
    board.load(SOLUTION)
    assert board.is_solved()


def test_gap_is_not_solved():
    board = Board(random.Random(0))
    grid = [row[:] for row in SOLUTION]
    grid[4][4] = 0
    board.load(grid)
    assert not board.is_solved()


def test_column_clash_is_not_solved():
    board = Board(random.Random(0))
    grid = [row[:] for row in SOLUTION]
    grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
    board.load(grid)
    assert not board.is_solved()


def test_box_clash_is_not_solved():
    # Swapping rows from different bands keeps rows and columns valid.
    board = Board(random.Random(0))
    grid = [row[:] for row in SOLUTION]
    grid[0], grid[3] = grid[3], grid[0]
    board.load(grid)
    assert not board.is_solved()


def test_premade_puzzles_are_unsolved():
    board = Board(random.Random(0))
    for grid in PREMADE_GRIDS:
        board.load(grid)
        assert not board.is_solved()