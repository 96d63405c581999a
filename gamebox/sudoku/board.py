"""Sudoku grid state, the puzzles it starts from, and the solved check."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

GRID_SIZE = 9
SUB_GRID_SIZE = 3
VIRTUAL_HEIGHT = 50
TILE_SIZE = VIRTUAL_HEIGHT / GRID_SIZE

PREMADE_GRIDS: List[List[List[int]]] = [
    [
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ],
    [
        [4, 0, 0, 0, 0, 1, 0, 7, 0],
        [7, 6, 0, 0, 0, 0, 5, 0, 0],
        [0, 0, 0, 0, 0, 0, 0, 6, 0],
        [0, 0, 0, 1, 0, 0, 0, 2, 5],
        [0, 0, 0, 5, 0, 0, 0, 0, 3],
        [0, 0, 0, 7, 6, 4, 0, 0, 6],
        [0, 5, 0, 0, 0, 8, 0, 0, 0],
        [0, 0, 2, 0, 0, 0, 8, 0, 9],
        [0, 0, 1, 0, 4, 0, 0, 0, 0],
    ],
    [
        [9, 0, 6, 8, 0, 0, 0, 0, 0],
        [0, 5, 0, 0, 4, 9, 6, 0, 2],
        [4, 7, 3, 2, 0, 6, 0, 0, 9],
        [0, 0, 0, 1, 3, 2, 9, 0, 7],
        [7, 0, 4, 5, 9, 0, 0, 1, 0],
        [0, 0, 9, 0, 0, 0, 0, 0, 0],
        [0, 0, 2, 0, 1, 5, 0, 6, 8],
        [5, 6, 0, 0, 0, 7, 3, 0, 1],
        [1, 0, 0, 6, 0, 0, 4, 0, 0],
    ],
]


@dataclass
class Tile:
    num: int = 0
    locked: bool = False
    known: bool = False
    can_be: List[bool] = field(default_factory=lambda: [False] * GRID_SIZE)


class Board:
    """A 9 x 9 grid of tiles; given numbers are locked against change."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.grid: List[List[Tile]] = []
        self.reset()

    def reset(self) -> None:
        """Load one of the premade puzzles at random."""
        self.load(self.rng.choice(PREMADE_GRIDS))

    def load(self, grid: Sequence[Sequence[int]]) -> None:
        """Replace the tiles with ``grid``; non-zero numbers become locked givens."""
        if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
            raise ValueError(f"grid must be {GRID_SIZE} x {GRID_SIZE}")
        self.grid = [[Tile(num=n, locked=n != 0) for n in row] for row in grid]

    def clear(self, n: int = 0) -> None:
        """Set every unlocked tile to ``n``."""
        for row in self.grid:
            for tile in row:
                if not tile.locked:
                    tile.num = n

    def set(self, row: int, col: int, n: int) -> bool:
        """Write ``n`` (0 erases) into an unlocked tile; return whether it was written."""
        if not 0 <= n <= GRID_SIZE:
            raise ValueError(f"number must be between 0 and {GRID_SIZE}")
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise IndexError(f"no tile at ({row}, {col})")
        tile = self.grid[row][col]
        if tile.locked:
            return False
        tile.num = n
        return True

    def _units(self) -> Iterator[List[int]]:
        for row in self.grid:
            yield [t.num for t in row]
        for c in range(GRID_SIZE):
            yield [row[c].num for row in self.grid]
        for br in range(0, GRID_SIZE, SUB_GRID_SIZE):
            for bc in range(0, GRID_SIZE, SUB_GRID_SIZE):
                yield [
                    self.grid[r][c].num
                    for r in range(br, br + SUB_GRID_SIZE)
                    for c in range(bc, bc + SUB_GRID_SIZE)
                ]

    def is_solved(self) -> bool:
        """Whether every tile is filled and each row, column and box holds 1 to 9."""
        if any(t.num == 0 for row in self.grid for t in row):
            return False
        full = set(range(1, GRID_SIZE + 1))
        return all(set(unit) == full for unit in self._units())