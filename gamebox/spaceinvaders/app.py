"""The playable Space Invaders screen and its window loop."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Any, Collection, Optional, Sequence, Tuple

import pygame

from gamebox.keys import Key
from gamebox.page import Page
from gamebox.spaceinvaders.entities import (
    BULLET_HEIGHT,
    BULLET_WIDTH,
    ENTITY_SIZE,
    FPS,
)
from gamebox.spaceinvaders.world import Phase, World
from gamebox.visual import VisualHandler
from gamebox.widgets import BLACK, WHITE, Button, StaticText

SCREEN_WIDTH = 640
SCREEN_HEIGHT = SCREEN_WIDTH // 2
VIRTUAL_WIDTH = 100

BUTTON_COLOR = (64, 64, 64, 255)
BULLET_COLOR = (0, 255, 0, 255)

IMAGES = ("missing", "icon", "player", "alien1", "alien2", "alien3", "tower")


class SpaceInvadersGame:
    """Space Invaders played with A, D and Space on a virtual 100 x 50 screen."""

    def __init__(self, visual: Any, rng: Optional[random.Random] = None) -> None:
        self.visual = visual
        self.world = World(rng)
        font = visual.get_font("default")
        self.play = Page(
            title="",
            bg_color=BLACK,
            bg_draw=True,
            text=[StaticText("", 1, 1, WHITE, font, 3)],
        )
        self.lose = Page(
            title="You Lost",
            bg_color=BLACK,
            bg_draw=True,
            buttons=[
                Button(
                    x=43,
                    y=25,
                    w=14,
                    h=7,
                    name="reset",
                    bg_color=BUTTON_COLOR,
                    text="reset",
                    text_color=WHITE,
                    font_size=3,
                )
            ],
            text=[StaticText("", 50, 15, WHITE, font, 3, "center")],
        )

    @property
    def phase(self) -> Phase:
        return self.world.phase

    def update(
        self,
        mouse_pos: Tuple[float, float],
        clicked: bool = False,
        keys: Collection[Key] = (),
    ) -> None:
        """Advance one frame given the virtual mouse position, a left click and the held keys."""
        if self.world.phase is Phase.PLAY:
            self.world.step(Key.A in keys, Key.D in keys, Key.SPACE in keys)
        elif self.world.phase is Phase.LOSE:
            pressed, _, _ = self.lose.update(mouse_pos, mouse_clicked=clicked)
            if pressed == "reset":
                self.world.reset()

        score = str(self.world.score)
        self.play.text[0].text = score
        self.lose.text[0].text = score

    def _draw_play(self) -> None:
        vis = self.visual
        world = self.world
        self.play.draw(vis)

        player = world.player
        player_image = vis.get_image(player.image)
        vis.draw_image(player_image, player.x, player.y, ENTITY_SIZE, ENTITY_SIZE)
        for i in range(player.lives):
            vis.draw_image(
                player_image, 100 - (ENTITY_SIZE + 1) * (i + 1), 1, ENTITY_SIZE, ENTITY_SIZE
            )

        for alien in world.pack.aliens():
            if not alien.dead:
                vis.draw_image(vis.get_image(alien.image), alien.x, alien.y, ENTITY_SIZE, ENTITY_SIZE)

        for tower in world.towers:
            if tower.health > 0:
                vis.draw_image(vis.get_image(tower.image), tower.x, tower.y, ENTITY_SIZE, ENTITY_SIZE)

        for bullet in world.bullets:
            vis.draw_rect(bullet.x, bullet.y, BULLET_WIDTH, BULLET_HEIGHT, BULLET_COLOR)

    def draw(self) -> None:
        if self.world.phase is Phase.PLAY:
            self._draw_play()
        elif self.world.phase is Phase.LOSE:
            self.lose.draw(self.visual)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the Space Invaders window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="spaceinvaders")
    parser.add_argument("--assets", default="assets/images", help="directory of images")
    parser.add_argument("--release", action="store_true", help="log errors instead of raising")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Space Invaders")

        visual = VisualHandler(SCREEN_WIDTH, VIRTUAL_WIDTH, args.release)
        for name in IMAGES:
            visual.load_image(name, Path(args.assets) / f"{name}.png")
        pygame.display.set_icon(visual.get_image("icon"))
        visual.load_fonts()

        game = SpaceInvadersGame(visual)
        clock = pygame.time.Clock()
        held_keys = ((Key.A, pygame.K_a), (Key.D, pygame.K_d), (Key.SPACE, pygame.K_SPACE))
        print("Starting")

        running = True
        while running:
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True
            pressed = pygame.key.get_pressed()
            keys = {key for key, code in held_keys if pressed[code]}
            mx, my = pygame.mouse.get_pos()
            game.update((visual.untranslate(mx), visual.untranslate(my)), clicked, keys)

            visual.begin_frame(screen)
            game.draw()
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()

    print("Ended")
    return 0