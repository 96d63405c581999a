"""Step-by-step automatic Sudoku solver, run a frame's worth at a time."""

from __future__ import annotations

import time

from gamebox.sudoku.board import GRID_SIZE, SUB_GRID_SIZE, Board, Tile

FPS = 60
MS_PER_FRAME = 1000 // FPS


class AutoSolver:
    """Fills a board by candidate elimination, falling back to counting through numbers.

    The solver walks the grid one tile per step, so its progress can be shown
    while it works.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.solving = False
        self.robot_solving = False
        self.checked_all_poss = False
        self.row = 0
        self.col = 0

    @property
    def _tile(self) -> Tile:
        return self.board.grid[self.row][self.col]

    def start(self) -> None:
        """Erase the player's entries and begin solving."""
        self.board.clear(0)
        self.solving = True
        self.robot_solving = False
        self.checked_all_poss = False

    def step(self) -> bool:
        """Do one unit of work; return True once the board is solved."""
        if self.robot_solving:
            self.brute_force()
        else:
            self.robot_solving = not self.human_solve()

        if self.board.is_solved():
            self.solving = False
            return True
        return False

    def run_frame(self, budget_ms: int = MS_PER_FRAME) -> bool:
        """Step while solving until ``budget_ms`` has passed; return True if solved."""
        if not self.solving:
            return False
        start = time.monotonic()
        while int((time.monotonic() - start) * 1000) < budget_ms:
            if self.step():
                return True
            if not self.solving:
                break
        return False

    def human_solve(self) -> bool:
        """Advance the elimination pass; return False when it has stopped making progress."""
        if not self.checked_all_poss:
            if self.check_all_valid_poss():
                self.checked_all_poss = True
            return True

        if self.place_ensured_tile():
            self.checked_all_poss = False
            return True

        return not (self.row == 0 and self.col == 0)

    def next_tile(self) -> bool:
        """Move to the next tile; return True if the walk wrapped to the start."""
        self.move(self.row, self.col + 1)
        return self.row == 0 and self.col == 0

    def place_ensured_tile(self) -> bool:
        """Fill the current tile if it has exactly one candidate, then move on."""
        tile = self._tile
        if tile.num != 0 or tile.locked:
            self.next_tile()
            return False

        candidates = [i for i, ok in enumerate(tile.can_be) if ok]
        if len(candidates) == 1:
            tile.num = candidates[0] + 1
            tile.known = True
            self.next_tile()
            return True

        self.next_tile()
        return False

    def check_all_valid_poss(self) -> bool:
        """Work out the current tile's candidates, move on, and report a wrap."""
        tile = self._tile
        if tile.num != 0 or tile.locked:
            return self.next_tile()

        grid = self.board.grid
        row, col = self.row, self.col
        can_be = [True] * GRID_SIZE

        for r in range(GRID_SIZE):
            if r != row and grid[r][col].num != 0:
                can_be[grid[r][col].num - 1] = False

        for c in range(GRID_SIZE):
            if c != col and grid[row][c].num != 0:
                can_be[grid[row][c].num - 1] = False

        start_row = row - row % SUB_GRID_SIZE
        start_col = col - col % SUB_GRID_SIZE
        for r in range(start_row, start_row + SUB_GRID_SIZE):
            for c in range(start_col, start_col + SUB_GRID_SIZE):
                if r == row or c == col or grid[r][c].num == 0:
                    continue
                can_be[grid[r][c].num - 1] = False

        tile.can_be = can_be
        return self.next_tile()

    def brute_force(self) -> None:
        """Count the current tile up to its next number that clashes with nothing after it."""
        if not 0 <= self.row < GRID_SIZE:
            self.solving = False
            return

        tile = self._tile
        if tile.locked or tile.known:
            self.move(self.row, self.col + 1)
            return

        if tile.num == 9:
            tile.num = 1
            self.move(self.row, self.col + 1)
            return

        while True:
            tile.num += 1
            if tile.num == 9:
                break
            if (
                self.count_row_matches(self.row, self.col, tile.num) == 0
                and self.count_col_matches(self.row, self.col, tile.num) == 0
            ):
                break

        self.move(0, 0)

    def count_row_matches(self, row: int, col: int, n: int) -> int:
        """Count tiles holding ``n`` to the right of ``(row, col)``."""
        return sum(t.num == n for t in self.board.grid[row][col + 1 :])

    def count_col_matches(self, row: int, col: int, n: int) -> int:
        """Count tiles holding ``n`` below ``(row, col)``."""
        return sum(line[col].num == n for line in self.board.grid[row + 1 :])

    def move(self, row: int, col: int) -> None:
        """Go to a tile, wrapping across rows; leaving the grid returns to the start."""
        if col < 0:
            row -= 1
            col = GRID_SIZE - 1
        if col >= GRID_SIZE:
            row += 1
            col = 0

        if not 0 <= row < GRID_SIZE:
            self.row = self.col = 0
            return

        self.row = row
        self.col = col