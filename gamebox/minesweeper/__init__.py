"""Minesweeper: the board rules and the playable game."""