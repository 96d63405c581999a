"""The playable Minesweeper screen: board, flag counter, timer and reset face."""

from __future__ import annotations

import argparse
import random
import time
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple

import pygame

from gamebox.minesweeper.board import GRID_SIZE, START_MINES, Board, Phase, Tile
from gamebox.page import Page
from gamebox.visual import VisualHandler
from gamebox.widgets import BLACK, WHITE, Button, StaticText

SCREEN_WIDTH = 640
SCREEN_HEIGHT = SCREEN_WIDTH // 2
VIRTUAL_WIDTH = 100
VIRTUAL_HEIGHT = VIRTUAL_WIDTH // 2
FPS = 60
TILE_SIZE = VIRTUAL_HEIGHT / GRID_SIZE

BUTTON_COLOR = (64, 64, 64, 255)
HIDDEN_COLOR = (128, 128, 128, 255)
OPEN_COLOR = (64, 64, 64, 255)
EXPLODED_COLOR = (255, 0, 0, 255)

IMAGES = ("missing", "icon", "mine", "face", "flag")


class MinesweeperGame:
    """Minesweeper played with the mouse on a virtual 100 x 50 screen."""

    def __init__(self, visual: Any, rng: Optional[random.Random] = None) -> None:
        self.visual = visual
        self.board = Board(GRID_SIZE, START_MINES, rng)
        font = visual.get_font("default")
        self.page = Page(
            title="",
            bg_color=BLACK,
            bg_draw=True,
            buttons=[
                Button(
                    x=92.5,
                    y=0.5,
                    w=7,
                    h=7,
                    name="reset",
                    bg_color=BUTTON_COLOR,
                    bg_image=visual.get_image("face"),
                )
            ],
            text=[
                StaticText("10", 75, 10, WHITE, font, 5, "center"),
                StaticText("10", 75, 16, WHITE, font, 5, "center"),
            ],
        )
        self.start_time = time.monotonic()
        self.reset()

    @property
    def phase(self) -> Phase:
        return self.board.phase

    def reset(self) -> None:
        """Start a new game with a fresh board and timer."""
        self.board.reset()
        self.start_time = time.monotonic()

    def cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Return the (row, col) under a virtual point, or None off the grid."""
        col = int(x / TILE_SIZE)
        row = int(y / TILE_SIZE)
        if 0 <= col < GRID_SIZE and 0 <= row < GRID_SIZE:
            return row, col
        return None

    def left_click(self, x: float, y: float) -> None:
        cell = self.cell_at(x, y)
        if cell is not None:
            self.board.open(*cell)

    def right_click(self, x: float, y: float) -> None:
        cell = self.cell_at(x, y)
        if cell is None:
            return
        self.board.toggle_flag(*cell)
        self.page.text[0].text = str(self.board.flags)

    def update(
        self,
        mouse_pos: Tuple[float, float],
        left_clicked: bool = False,
        right_clicked: bool = False,
        now: Optional[float] = None,
    ) -> None:
        """Advance one frame given the virtual mouse position and the clicks."""
        if now is None:
            now = time.monotonic()

        playing = self.board.phase is Phase.PLAY
        if playing:
            self.page.text[1].text = str(int(now - self.start_time))

        pressed, _, _ = self.page.update(mouse_pos, mouse_clicked=left_clicked)
        if pressed == "reset":
            self.reset()
            self.start_time = now

        if playing:
            if left_clicked:
                self.left_click(*mouse_pos)
            if right_clicked:
                self.right_click(*mouse_pos)

    def _draw_tile(self, tile: Tile) -> None:
        vis = self.visual
        x = tile.col * TILE_SIZE
        y = tile.row * TILE_SIZE

        if tile.flagged:
            vis.draw_rect(x, y, TILE_SIZE, TILE_SIZE, HIDDEN_COLOR)
            vis.draw_image(vis.get_image("flag"), x, y, TILE_SIZE, TILE_SIZE)
        elif tile.exploded:
            vis.draw_rect(x, y, TILE_SIZE, TILE_SIZE, EXPLODED_COLOR)
            vis.draw_image(vis.get_image("mine"), x, y, TILE_SIZE, TILE_SIZE)
        elif tile.revealed:
            vis.draw_rect(x, y, TILE_SIZE, TILE_SIZE, OPEN_COLOR)
            if tile.surrounds:
                vis.draw_text(
                    str(tile.surrounds),
                    TILE_SIZE * 0.8,
                    x,
                    y,
                    vis.get_font("default"),
                    "left",
                    WHITE,
                )
        elif tile.mine and self.board.phase is Phase.LOSE:
            vis.draw_rect(x, y, TILE_SIZE, TILE_SIZE, OPEN_COLOR)
            vis.draw_image(vis.get_image("mine"), x, y, TILE_SIZE, TILE_SIZE)
        else:
            vis.draw_rect(x, y, TILE_SIZE, TILE_SIZE, HIDDEN_COLOR)

    def draw(self) -> None:
        self.page.draw(self.visual)
        for line in self.board.grid:
            for tile in line:
                self._draw_tile(tile)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the Minesweeper window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="minesweeper")
    parser.add_argument("--assets", default="assets/images", help="directory of images")
    parser.add_argument("--release", action="store_true", help="log errors instead of raising")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Minesweeper")

        visual = VisualHandler(SCREEN_WIDTH, VIRTUAL_WIDTH, args.release)
        for name in IMAGES:
            visual.load_image(name, Path(args.assets) / f"{name}.png")
        pygame.display.set_icon(visual.get_image("icon"))
        visual.load_fonts()

        game = MinesweeperGame(visual)
        clock = pygame.time.Clock()
        print("Starting")

        running = True
        while running:
            left = flag = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:
                        left = True
                    elif event.button == 2:
                        # Flags go on the middle button.
                        flag = True
            mx, my = pygame.mouse.get_pos()
            game.update((visual.untranslate(mx), visual.untranslate(my)), left, flag)

            visual.begin_frame(screen)
            game.draw()
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()

    print("Ended")
    return 0