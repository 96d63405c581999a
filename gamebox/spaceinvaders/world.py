"""Space Invaders game state and its per-frame rules."""

from __future__ import annotations

import random
from enum import Enum
from typing import List, Optional

from gamebox.spaceinvaders.entities import (
    ENTITY_SIZE,
    FPS,
    AlienPack,
    Bullet,
    Player,
    Tower,
)

START_SPEED = 0.05
TOWER_COUNT = 3


class Phase(Enum):
    PLAY = 0
    LOSE = 1


class World:
    """Player, towers, alien pack and bullets, advanced one frame at a time."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.pack = AlienPack()
        self.reset()

    def reset(self) -> None:
        self.phase = Phase.PLAY
        self.player = Player(
            x=50, y=49 - ENTITY_SIZE, weapon_cooldown_max=FPS, image="player", lives=3
        )
        self.score = 0
        self.pack.new_pack()
        self.bullets: List[Bullet] = []
        self.pack.dx = START_SPEED
        self.towers = [
            Tower(x=float(25 * (i + 1)), y=50 - 2 * (ENTITY_SIZE + 1), health=10, image="tower")
            for i in range(TOWER_COUNT)
        ]

    def step(self, left: bool = False, right: bool = False, fire: bool = False) -> None:
        """Advance one frame of play; does nothing once the game is lost."""
        if self.phase is not Phase.PLAY:
            return

        shot = self.player.update(left, right, fire)
        if shot is not None:
            self.bullets.append(shot)

        self.bullets.extend(self.pack.update(self.rng))

        # Newest bullets are handled first.
        survivors = []
        for bullet in reversed(self.bullets):
            bullet.advance()
            if not (bullet.out_of_bounds() or self.bullet_hits(bullet)):
                survivors.append(bullet)
        survivors.reverse()
        self.bullets = survivors

        self.check_lose()
        self.check_win()

    def bullet_hits(self, bullet: Bullet) -> bool:
        """Resolve a bullet against the player, the towers and the aliens."""
        if self.player.hit(bullet):
            return True
        if any(tower.hit(bullet) for tower in self.towers):
            return True
        for alien in self.pack.aliens():
            if alien.hit(bullet):
                self.score += alien.points
                return True
        return False

    def check_lose(self) -> bool:
        """Enter the LOSE phase if the player, the towers or the line has fallen."""
        lost = (
            self.player.lives == 0
            or all(tower.health <= 0 for tower in self.towers)
            or any(
                not alien.dead and alien.y + ENTITY_SIZE >= self.towers[0].y
                for alien in self.pack.aliens()
            )
        )
        if lost:
            self.phase = Phase.LOSE
        return lost

    def check_win(self) -> bool:
        """Bring in a new, faster pack once every alien is dead."""
        if not self.pack.empty():
            return False
        self.pack.new_pack()
        self.pack.dx *= 1.01
        return True