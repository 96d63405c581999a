"""Minesweeper board state and rules."""

from __future__ import annotations

import bisect
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

GRID_SIZE = 9
START_MINES = 10


class Phase(Enum):
    PLAY = 0
    WIN = 1
    LOSE = 2


@dataclass
class Tile:
    row: int
    col: int
    surrounds: int = 0
    mine: bool = False
    flagged: bool = False
    revealed: bool = False
    exploded: bool = False


class Board:
    """A square grid of tiles with mines laid out after the first opening."""

    def __init__(
        self,
        size: int = GRID_SIZE,
        mines: int = START_MINES,
        rng: Optional[random.Random] = None,
    ) -> None:
        if size < 1:
            raise ValueError("board size must be at least 1")
        if not 0 <= mines < size * size:
            raise ValueError("mine count must leave at least one safe tile")
        self.size = size
        self.mines = mines
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        self.phase = Phase.PLAY
        self.flags = self.mines
        self.first_click = True
        self.grid: List[List[Tile]] = [
            [Tile(r, c) for c in range(self.size)] for r in range(self.size)
        ]

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def open(self, row: int, col: int) -> None:
        """Open a tile as a player would; the first opening lays the mines."""
        if not self._inside(row, col):
            return
        if self.first_click:
            self.first_click = False
            self.place_mines(row, col)
            self.count_mines()
        self.reveal(row, col)

    def place_mines(self, row: int, col: int) -> None:
        """Lay the mines at random, never on the given tile."""
        avoids = [row * self.size + col]
        for _ in range(self.mines):
            pos = self.rng.randrange(self.size * self.size - len(avoids))
            for avoid in avoids:
                if pos >= avoid:
                    pos += 1
            self.grid[pos // self.size][pos % self.size].mine = True
            bisect.insort(avoids, pos)

    def count_mines(self) -> None:
        """Add each tile's count of neighbouring mines to its ``surrounds``."""
        for line in self.grid:
            for tile in line:
                tile.surrounds += sum(n.mine for n in self.neighbours(tile.row, tile.col))

    def neighbours(self, row: int, col: int) -> Iterator[Tile]:
        """Yield the tiles around a position, row by row."""
        for nr in range(row - 1, row + 2):
            for nc in range(col - 1, col + 2):
                if (nr, nc) != (row, col) and self._inside(nr, nc):
                    yield self.grid[nr][nc]

    def reveal(self, row: int, col: int) -> None:
        """Uncover a tile, spreading over tiles with no neighbouring mines."""
        if not self._inside(row, col):
            return
        pending = [self.grid[row][col]]
        while pending:
            tile = pending.pop()
            if tile.revealed or tile.flagged:
                continue
            tile.revealed = True
            if tile.mine:
                self.phase = Phase.LOSE
                tile.exploded = True
                continue
            self.check_win()
            if tile.surrounds == 0:
                pending.extend(reversed(list(self.neighbours(tile.row, tile.col))))

    def toggle_flag(self, row: int, col: int) -> None:
        """Place or take back a flag on a hidden tile, within the flags left."""
        if not self._inside(row, col):
            return
        tile = self.grid[row][col]
        if tile.revealed:
            return
        if tile.flagged:
            tile.flagged = False
            self.flags += 1
        elif self.flags > 0:
            tile.flagged = True
            self.flags -= 1

    def check_win(self) -> bool:
        """Enter the WIN phase once every safe tile is revealed."""
        if any(not t.revealed and not t.mine for line in self.grid for t in line):
            return False
        self.phase = Phase.WIN
        return True