import random

import pytest

from gamebox.sudoku.app import SOLVED_COLOR, SudokuGame
from gamebox.sudoku.board import PREMADE_GRIDS, TILE_SIZE
from gamebox.widgets import WHITE


class FakeVisual:
    def __init__(self):
        self.lines = []
        self.texts = []
        self.rects = []

    def get_font(self, name):
        return name

    def get_image(self, name):
        return name

    def draw_image(self, image, x, y, w, h):
        pass

    def draw_rect(self, x, y, w, h, color):
        self.rects.append((x, y, w, h, color))

    def draw_line(self, x1, y1, x2, y2, w, color):
        self.lines.append((x1, y1, x2, y2, w, color))

    def draw_text(self, text, size, x, y, font, align, color):
        self.texts.append((text, size, x, y, align))

    def translate(self, d):
        return d

    def fill(self, color):
        pass


def solved_grid():
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


@pytest.fixture
def game():
    g = SudokuGame(FakeVisual(), random.Random(1))
    g.board.load(PREMADE_GRIDS[0])
    return g


def centre(row, col):
    return col * TILE_SIZE + TILE_SIZE / 2, row * TILE_SIZE + TILE_SIZE / 2


def test_change_number_updates_label(game):
    game.change_number(5)
    assert game.cur_number == 5
    assert game.page.text[0].text == "CurCode: 5"


def test_change_number_rejects_out_of_range(game):
    with pytest.raises(ValueError):
        game.change_number(10)


def test_pad_button_selects_number(game):
    game.update((58, 34), clicked=True)
    assert game.cur_number == 7
    assert game.page.text[0].text == "CurCode: 7"


def test_left_click_writes_unlocked_tile(game):
    game.change_number(4)
    game.left_click(*centre(0, 2))
    assert game.board.grid[0][2].num == 4


def test_left_click_keeps_locked_tile(game):
    game.change_number(1)
    game.left_click(*centre(0, 0))
    assert game.board.grid[0][0].num == PREMADE_GRIDS[0][0][0]


def test_left_click_off_grid_changes_nothing(game):
    game.change_number(2)
    game.left_click(95, 45)
    assert [[t.num for t in row] for row in game.board.grid] == PREMADE_GRIDS[0]


def test_auto_button_clears_entries_and_starts(game):
    game.change_number(4)
    game.left_click(*centre(0, 2))
    game.update((80, 4), clicked=True)
    assert game.auto_solving
    assert game.board.grid[0][2].num == 0
    assert game.board.grid[0][0].num == PREMADE_GRIDS[0][0][0]


def test_clicks_ignored_while_auto_solving(game):
    game.update((80, 4), clicked=True)
    game.change_number(6)
    game.left_click(*centre(0, 2))
    assert game.board.grid[0][2].num == 0


def test_reset_button_stops_solving(game):
    game.update((80, 4), clicked=True)
    game.update((65, 4), clicked=True)
    assert not game.auto_solving
    grid = [[t.num for t in row] for row in game.board.grid]
    assert grid in PREMADE_GRIDS


def test_draw_unsolved_uses_white_lines(game):
    game.draw()
    vis = game.visual
    assert len(vis.lines) == 20
    assert all(line[5] == WHITE for line in vis.lines)
    assert sum(1 for line in vis.lines if line[4] == 1) == 8


def test_draw_solved_uses_green_lines(game):
    game.board.load(solved_grid())
    game.draw()
    assert all(line[5] == SOLVED_COLOR for line in game.visual.lines)


def test_draw_numbers_one_per_filled_tile(game):
    game.draw()
    numbers = [t for t in game.visual.texts if t[4] == "middle"]
    filled = sum(1 for row in PREMADE_GRIDS[0] for n in row if n)
    assert len(numbers) == filled
    assert ("5", TILE_SIZE, TILE_SIZE / 2, TILE_SIZE / 2, "middle") in numbers