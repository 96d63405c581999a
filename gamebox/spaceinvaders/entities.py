"""Space Invaders entities: bullets, aliens, the alien pack, the player and towers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

FPS = 60

ENTITY_SIZE = 5

BULLET_WIDTH = 0.5
BULLET_HEIGHT = 2.5

PACK_WIDTH = 6
PACK_HEIGHT = 3

PLAYER_BULLET_SPEED = -1.0
ALIEN_BULLET_SPEED = 0.5

# Horizontal offset that puts a bullet in the middle of its shooter.
_MUZZLE_OFFSET = ENTITY_SIZE // 2 - BULLET_WIDTH / 2

# (image, shoot chance, points) for each pack row, top row first.
_ROWS = [
    ("alien3", 0.0015, 300),
    ("alien2", 0.001, 200),
    ("alien1", 0.0005, 100),
]


def rect_collide(
    x1: float, y1: float, w1: float, h1: float, x2: float, y2: float, w2: float, h2: float
) -> bool:
    """Whether two rectangles overlap or touch."""
    return not (x1 + w1 < x2 or x1 > x2 + w2 or y1 + h1 < y2 or y1 > y2 + h2)


def _collides(bullet: "Bullet", x: float, y: float) -> bool:
    return rect_collide(
        bullet.x, bullet.y, BULLET_WIDTH, BULLET_HEIGHT, x, y, ENTITY_SIZE, ENTITY_SIZE
    )


@dataclass
class Bullet:
    x: float
    y: float
    dy: float

    def advance(self) -> None:
        self.y += self.dy

    def out_of_bounds(self) -> bool:
        return self.y < -BULLET_HEIGHT or self.y > 100


@dataclass
class Alien:
    x: float = 0.0
    y: float = 0.0
    image: str = ""
    shoot_chance: float = 0.0
    points: int = 0
    dead: bool = False

    def hit(self, bullet: Bullet) -> bool:
        """Kill the alien if a player's bullet touches it."""
        if not _collides(bullet, self.x, self.y) or self.dead:
            return False
        if bullet.dy != PLAYER_BULLET_SPEED:
            return False
        self.dead = True
        return True

    def shoot(self, rng: random.Random) -> Optional[Bullet]:
        """Fire downwards with the alien's chance; return the bullet, if any."""
        if rng.random() >= self.shoot_chance:
            return None
        return Bullet(self.x + _MUZZLE_OFFSET, self.y + ENTITY_SIZE + 1, ALIEN_BULLET_SPEED)

    def at_edge(self) -> bool:
        return self.x <= 1 or self.x >= 99 - ENTITY_SIZE


@dataclass
class AlienPack:
    """The grid of aliens, indexed ``pack[column][row]``, moving sideways together."""

    pack: List[List[Alien]] = field(default_factory=list)
    dx: float = 0.0

    def __post_init__(self) -> None:
        if not self.pack:
            self.new_pack()

    def new_pack(self) -> None:
        """Replace the pack with a full formation; the speed is kept."""
        self.pack = [
            [
                Alien(
                    x=float((c + 1) * (ENTITY_SIZE + 1)),
                    y=float((r + 1) * (ENTITY_SIZE + 1)),
                    image=image,
                    shoot_chance=chance,
                    points=points,
                )
                for r, (image, chance, points) in enumerate(_ROWS)
            ]
            for c in range(PACK_WIDTH)
        ]

    def aliens(self) -> Iterator[Alien]:
        """Yield every alien, column by column."""
        for column in self.pack:
            yield from column

    def empty(self) -> bool:
        return all(alien.dead for alien in self.aliens())

    def update(self, rng: random.Random) -> List[Bullet]:
        """Move the pack one frame, let living aliens shoot, and turn at the edges."""
        shots: List[Bullet] = []
        flip = False
        for alien in self.aliens():
            alien.x += self.dx
            if alien.dead:
                continue
            bullet = alien.shoot(rng)
            if bullet is not None:
                shots.append(bullet)
            if alien.at_edge():
                flip = True
        if flip:
            self.flip()
        return shots

    def flip(self) -> None:
        """Speed up, reverse direction and drop down."""
        self.dx *= -1.01
        for alien in self.aliens():
            alien.y += ENTITY_SIZE // 2


@dataclass
class Player:
    x: float = 50.0
    y: float = 49.0 - ENTITY_SIZE
    image: str = "player"
    weapon_cooldown: int = 0
    weapon_cooldown_max: int = FPS
    lives: int = 3

    def hit(self, bullet: Bullet) -> bool:
        if not _collides(bullet, self.x, self.y):
            return False
        self.lives -= 1
        return True

    def shoot(self) -> Bullet:
        self.weapon_cooldown = self.weapon_cooldown_max
        return Bullet(self.x + _MUZZLE_OFFSET, self.y - BULLET_HEIGHT - 1, PLAYER_BULLET_SPEED)

    def update(self, left: bool = False, right: bool = False, fire: bool = False) -> Optional[Bullet]:
        """Apply one frame of input; return the bullet fired, if any."""
        bullet = None
        if self.weapon_cooldown > 0:
            self.weapon_cooldown -= 1
        elif fire:
            bullet = self.shoot()

        if left:
            self.x -= 1
        if right:
            self.x += 1
        self.x = min(max(self.x, 0), 100 - ENTITY_SIZE)
        return bullet


@dataclass
class Tower:
    x: float = 0.0
    y: float = 0.0
    health: int = 10
    image: str = "tower"

    def hit(self, bullet: Bullet) -> bool:
        if self.health == 0 or not _collides(bullet, self.x, self.y):
            return False
        self.health -= 1
        return True