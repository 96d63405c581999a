"""Minesweeper, Space Invaders and Sudoku, with a small shared interface toolkit."""

__version__ = "0.1.0"