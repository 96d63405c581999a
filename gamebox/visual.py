"""Drawing helper that maps virtual coordinates onto a pygame surface."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import pygame

from gamebox.errorlog import save_to_log
from gamebox.widgets import WHITE, Color

ASPECT_RATIO = 2

_FONT_NAMES = ("default", "button", "textBox")


@dataclass(frozen=True)
class _FontSource:
    """A font file to render from; None stands for pygame's built-in font."""

    path: Optional[str] = None


class VisualHandler:
    """Holds images and fonts and draws them in virtual units.

    Virtual coordinates run from 0 to ``virtual_width`` across the screen; the
    screen is always twice as wide as it is tall.
    """

    def __init__(
        self, screen_width: int, virtual_width: int = 100, is_release: bool = False
    ) -> None:
        self.actual_width = float(screen_width)
        self.actual_height = self.actual_width / ASPECT_RATIO
        self.virtual_width = float(virtual_width)
        self.virtual_height = self.virtual_width / ASPECT_RATIO
        self.is_release = is_release
        self.images: Dict[str, Any] = {}
        self.fonts: Dict[str, Optional[_FontSource]] = {}
        self.surface: Optional[pygame.Surface] = None
        self._font_cache: Dict[Tuple[Optional[str], int], pygame.font.Font] = {}

    def change_res(self, screen_width: int) -> None:
        self.actual_width = float(screen_width)
        self.actual_height = self.actual_width / ASPECT_RATIO

    def begin_frame(self, surface: pygame.Surface) -> None:
        """Set the surface that the following draw calls paint on."""
        self.surface = surface

    def translate(self, d: float) -> float:
        """Convert a virtual length to screen pixels."""
        return d * self.actual_width / self.virtual_width

    def untranslate(self, d: float) -> float:
        """Convert screen pixels to a virtual length."""
        return d * self.virtual_width / self.actual_width

    def thin_line(self) -> float:
        """The virtual width of a single screen pixel."""
        return self.virtual_width / self.actual_width

    def _target(self) -> pygame.Surface:
        if self.surface is None:
            raise RuntimeError("no surface to draw on; call begin_frame first")
        return self.surface

    def fill(self, color: Color) -> None:
        self._target().fill(color)

    def draw_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        rect = pygame.Rect(
            round(self.translate(x)),
            round(self.translate(y)),
            round(self.translate(w)),
            round(self.translate(h)),
        )
        pygame.draw.rect(self._target(), color, rect)

    def draw_circle(self, x: float, y: float, r: float, color: Color) -> None:
        pygame.draw.circle(
            self._target(),
            color,
            (self.translate(x), self.translate(y)),
            self.translate(r),
        )

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, w: float, color: Color
    ) -> None:
        pygame.draw.line(
            self._target(),
            color,
            (self.translate(x1), self.translate(y1)),
            (self.translate(x2), self.translate(y2)),
            max(1, round(self.translate(w))),
        )

    def _scaled(self, image: pygame.Surface, w: float, h: float) -> pygame.Surface:
        size = (max(1, round(self.translate(w))), max(1, round(self.translate(h))))
        return pygame.transform.scale(image, size)

    def draw_image(self, image: pygame.Surface, x: float, y: float, w: float, h: float) -> None:
        """Draw ``image`` stretched over the virtual rectangle."""
        self._target().blit(
            self._scaled(image, w, h), (round(self.translate(x)), round(self.translate(y)))
        )

    def draw_image_rotated(
        self, image: pygame.Surface, x: float, y: float, w: float, h: float, rot: float
    ) -> None:
        """Draw ``image`` over the rectangle, turned clockwise by ``rot`` radians about its centre."""
        scaled = self._scaled(image, w, h)
        rotated = pygame.transform.rotate(scaled, -math.degrees(rot))
        centre = (
            self.translate(x) + scaled.get_width() / 2,
            self.translate(y) + scaled.get_height() / 2,
        )
        self._target().blit(rotated, rotated.get_rect(center=(round(centre[0]), round(centre[1]))))

    def _pygame_font(self, font: Optional[_FontSource], size: float) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        path = font.path if font is not None else None
        key = (path, max(1, round(size)))
        cached = self._font_cache.get(key)
        if cached is None:
            cached = pygame.font.Font(path, key[1])
            self._font_cache[key] = cached
        return cached

    def draw_text(
        self,
        text: str,
        size: float,
        x: float,
        y: float,
        font: Optional[_FontSource] = None,
        align: str = "left",
        color: Color = WHITE,
    ) -> None:
        """Draw ``text`` with its top edge at ``y``.

        ``align`` is "left", "center" or "right" for where ``x`` sits on the
        line; "middle" centres the text on ``(x, y)`` both ways.
        """
        rendered = self._pygame_font(font, self.translate(size)).render(text, True, color)
        px = self.translate(x)
        py = self.translate(y)
        if align in ("center", "middle"):
            px -= rendered.get_width() / 2
        elif align in ("right", "end"):
            px -= rendered.get_width()
        if align == "middle":
            py -= rendered.get_height() / 2
        self._target().blit(rendered, (round(px), round(py)))

    def register_image(self, name: str, image: Any) -> None:
        self.images[name] = image

    def load_image(self, name: str, path: Union[str, Path]) -> None:
        """Load an image file under ``name``; a failure is reported, not stored."""
        try:
            image = pygame.image.load(str(path))
        except (OSError, pygame.error):
            save_to_log(OSError(f"Couldn't load image: {path}"), self.is_release)
            return
        self.images[name] = image

    def get_image(self, name: str) -> Any:
        """Return the named image, falling back to the "missing" image."""
        image = self.images.get(name)
        if image is not None:
            return image
        save_to_log(LookupError(f"Couldn't find this image: {name}"), self.is_release)
        return self.images["missing"]

    def get_font(self, name: str) -> Optional[_FontSource]:
        """Return the named font, falling back to the default font."""
        if name in self.fonts:
            return self.fonts[name]
        save_to_log(LookupError(f"Couldn't find this font: {name}"), self.is_release)
        return self.fonts["default"]

    def load_fonts(self) -> None:
        """Register the built-in font as "default", "button" and "textBox"."""
        self.fonts = {}
        source: Optional[_FontSource]
        try:
            if not pygame.font.get_init():
                pygame.font.init()
            pygame.font.Font(None, 12)
            source = _FontSource()
        except pygame.error:
            save_to_log(OSError("Couldn't load fonts"), self.is_release)
            source = None
        for name in _FONT_NAMES:
            self.fonts[name] = source