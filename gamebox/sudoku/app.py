"""The playable Sudoku screen: grid, number pad, reset and auto-solve buttons."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import pygame

from gamebox.page import Page
from gamebox.sudoku.board import GRID_SIZE, SUB_GRID_SIZE, TILE_SIZE, Board
from gamebox.sudoku.solver import MS_PER_FRAME, AutoSolver
from gamebox.visual import VisualHandler
from gamebox.widgets import BLACK, WHITE, Button, StaticText

SCREEN_WIDTH = 640
SCREEN_HEIGHT = SCREEN_WIDTH // 2
VIRTUAL_WIDTH = 100
FPS = 60
THIN_LINE_WIDTH = VIRTUAL_WIDTH / SCREEN_WIDTH
THICK_LINE_WIDTH = 1

BUTTON_COLOR = (64, 64, 64, 255)
SOLVED_COLOR = (0, 255, 0, 255)

IMAGES = ("missing", "icon")

# (name, x, y) of each number-pad button; all are 7 x 7.
_PAD = [
    ("1", 55, 15),
    ("2", 63, 15),
    ("3", 71, 15),
    ("4", 55, 23),
    ("5", 63, 23),
    ("6", 71, 23),
    ("7", 55, 31),
    ("8", 63, 31),
    ("9", 71, 31),
    ("0", 63, 39),
]


def _button(name: str, x: float, y: float, w: float, h: float) -> Button:
    return Button(
        x=x,
        y=y,
        w=w,
        h=h,
        name=name,
        bg_color=BUTTON_COLOR,
        text=name,
        text_color=WHITE,
        font_size=3,
    )


class SudokuGame:
    """Sudoku played with the mouse: pick a number on the pad, then click a tile."""

    def __init__(self, visual: Any, rng: Optional[random.Random] = None) -> None:
        self.visual = visual
        self.board = Board(rng)
        self.solver = AutoSolver(self.board)
        self.cur_number = 0

        buttons: List[Button] = [
            _button("reset", 60, 1, 14, 7),
            _button("auto", 75, 1, 14, 7),
        ]
        buttons += [_button(name, x, y, 7, 7) for name, x, y in _PAD]
        self.page = Page(
            title="",
            bg_color=BLACK,
            bg_draw=True,
            buttons=buttons,
            text=[StaticText("CurCode: 0", 60, 9, WHITE, visual.get_font("default"), 3)],
        )

    @property
    def auto_solving(self) -> bool:
        return self.solver.solving

    def reset(self) -> None:
        """Load a new puzzle and stop any automatic solve."""
        self.board.reset()
        self.solver.solving = False

    def update(self, mouse_pos: Tuple[float, float], clicked: bool = False) -> None:
        """Advance one frame given the virtual mouse position and a left click."""
        if self.solver.solving:
            self.solver.run_frame(MS_PER_FRAME)

        pressed, _, _ = self.page.update(mouse_pos, mouse_clicked=clicked)
        if pressed == "reset":
            self.reset()
        elif pressed == "auto":
            self.solver.start()
        elif pressed.isdigit():
            self.change_number(int(pressed))

        if clicked:
            self.left_click(*mouse_pos)

    def change_number(self, n: int) -> None:
        """Choose the number that clicks write; 0 erases."""
        if not 0 <= n <= GRID_SIZE:
            raise ValueError(f"number must be between 0 and {GRID_SIZE}")
        self.cur_number = n
        self.page.text[0].text = f"CurCode: {n}"

    def left_click(self, x: float, y: float) -> None:
        """Write the chosen number into the unlocked tile under a virtual point."""
        if self.solver.solving:
            return
        col = int(x / TILE_SIZE)
        row = int(y / TILE_SIZE)
        if not (0 <= col < GRID_SIZE and 0 <= row < GRID_SIZE):
            return
        self.board.set(row, col, self.cur_number)

    def draw(self) -> None:
        vis = self.visual
        self.page.draw(vis)

        color = SOLVED_COLOR if self.board.is_solved() else WHITE
        end = TILE_SIZE * GRID_SIZE
        for i in range(GRID_SIZE + 1):
            width = THICK_LINE_WIDTH if i % SUB_GRID_SIZE == 0 else THIN_LINE_WIDTH
            vis.draw_line(TILE_SIZE * i, 0, TILE_SIZE * i, end, width, color)
        for i in range(GRID_SIZE + 1):
            width = THICK_LINE_WIDTH if i % SUB_GRID_SIZE == 0 else THIN_LINE_WIDTH
            vis.draw_line(0, TILE_SIZE * i, end, TILE_SIZE * i, width, color)

        font = vis.get_font("default")
        for r, line in enumerate(self.board.grid):
            for c, tile in enumerate(line):
                if tile.num == 0:
                    continue
                vis.draw_text(
                    str(tile.num),
                    TILE_SIZE,
                    c * TILE_SIZE + TILE_SIZE / 2,
                    r * TILE_SIZE + TILE_SIZE / 2,
                    font,
                    "middle",
                    WHITE,
                )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the Sudoku window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="sudoku")
    parser.add_argument("--assets", default="assets/images", help="directory of images")
    parser.add_argument("--release", action="store_true", help="log errors instead of raising")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Sudoku")

        visual = VisualHandler(SCREEN_WIDTH, VIRTUAL_WIDTH, args.release)
        for name in IMAGES:
            visual.load_image(name, Path(args.assets) / f"{name}.png")
        pygame.display.set_icon(visual.get_image("icon"))
        visual.load_fonts()

        game = SudokuGame(visual)
        clock = pygame.time.Clock()
        print("Starting")

        running = True
        while running:
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True
            mx, my = pygame.mouse.get_pos()
            game.update((visual.untranslate(mx), visual.untranslate(my)), clicked)

            visual.begin_frame(screen)
            game.draw()
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()

    print("Ended")
    return 0