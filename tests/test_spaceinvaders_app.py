import random

from gamebox.keys import Key
from gamebox.spaceinvaders.app import BULLET_COLOR, SpaceInvadersGame
from gamebox.spaceinvaders.entities import (
    ENTITY_SIZE,
    PACK_HEIGHT,
    PACK_WIDTH,
    Bullet,
    Player,
)
from gamebox.spaceinvaders.world import Phase
from gamebox.widgets import BLACK


class FakeVisual:
    def __init__(self):
        self.calls = []

    def get_image(self, name):
        return f"img:{name}"

    def get_font(self, name):
        return f"font:{name}"

    def draw_image(self, image, x, y, w, h):
        self.calls.append(("image", image, x, y, w, h))

    def draw_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def draw_line(self, x1, y1, x2, y2, w, color):
        self.calls.append(("line", x1, y1, x2, y2, w, color))

    def draw_text(self, text, size, x, y, font, align, color):
        self.calls.append(("text", text, size, x, y, font, align, color))

    def translate(self, d):
        return d

    def fill(self, color):
        self.calls.append(("fill", color))

    def images(self, prefix):
        return [c for c in self.calls if c[0] == "image" and c[1].startswith(prefix)]


def make_game(seed=1):
    visual = FakeVisual()
    return visual, SpaceInvadersGame(visual, random.Random(seed))


def lose_game(game):
    game.world.player.lives = 0
    game.update((0, 0))


def test_held_d_moves_player_right():
    _, game = make_game()
    before = game.world.player.x
    game.update((0, 0), keys={Key.D})
    assert game.world.player.x == before + 1


def test_held_a_moves_player_left():
    _, game = make_game()
    before = game.world.player.x
    game.update((0, 0), keys={Key.A})
    assert game.world.player.x == before - 1


def test_space_fires_player_bullet():
    _, game = make_game()
    game.world.player.weapon_cooldown = 0
    game.update((0, 0), keys={Key.SPACE})
    assert any(b.dy < 0 for b in game.world.bullets)
    assert game.world.player.weapon_cooldown == game.world.player.weapon_cooldown_max


def test_score_text_follows_world_score():
    _, game = make_game()
    game.world.score = 700
    game.update((0, 0))
    assert game.play.text[0].text == str(game.world.score)
    assert game.lose.text[0].text == game.play.text[0].text


def test_losing_then_reset_button_restarts():
    _, game = make_game()
    lose_game(game)
    assert game.phase is Phase.LOSE

    game.world.score = 500
    game.update((0, 0))
    assert game.phase is Phase.LOSE
    assert game.lose.text[0].text == "500"

    game.update((50, 28), clicked=True)
    assert game.phase is Phase.PLAY
    assert game.world.score == 0
    assert game.world.player.lives == Player().lives
    assert game.play.text[0].text == "0"


def test_click_outside_reset_button_stays_lost():
    _, game = make_game()
    lose_game(game)
    game.update((5, 5), clicked=True)
    assert game.phase is Phase.LOSE


def test_draw_play_shows_player_lives_and_pack():
    visual, game = make_game()
    game.draw()
    player = game.world.player

    assert ("fill", BLACK) in visual.calls
    player_images = visual.images("img:player")
    assert len(player_images) == 1 + player.lives
    assert player_images[0][2:] == (player.x, player.y, ENTITY_SIZE, ENTITY_SIZE)
    for i, call in enumerate(player_images[1:]):
        assert call[2:4] == (100 - (ENTITY_SIZE + 1) * (i + 1), 1)
    assert len(visual.images("img:alien")) == PACK_WIDTH * PACK_HEIGHT
    assert len(visual.images("img:tower")) == len(game.world.towers)


def test_draw_skips_dead_aliens_and_fallen_towers():
    visual, game = make_game()
    next(game.world.pack.aliens()).dead = True
    game.world.towers[0].health = 0
    game.draw()
    assert len(visual.images("img:alien")) == PACK_WIDTH * PACK_HEIGHT - 1
    assert len(visual.images("img:tower")) == len(game.world.towers) - 1


def test_draw_bullets_as_rects():
    visual, game = make_game()
    game.world.bullets = [Bullet(10, 20, 0.5)]
    game.draw()
    rects = [c for c in visual.calls if c[0] == "rect" and c[-1] == BULLET_COLOR]
    assert len(rects) == 1
    assert rects[0][1:3] == (10, 20)


def test_draw_lose_shows_title_and_no_entities():
    visual, game = make_game()
    lose_game(game)
    game.draw()
    texts = [c[1] for c in visual.calls if c[0] == "text"]
    assert "You Lost" in texts
    assert "reset" in texts
    assert visual.images("img:alien") == []