"""Sudoku: the board, the automatic solver and the playable game."""