"""Buttons, sliders and static text drawn through a renderer in virtual units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Tuple

Color = Tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
TRANSPARENT: Color = (0, 0, 0, 0)

SLIDER_HANDLE_WIDTH = 8


class Renderer(Protocol):
    """Drawing surface that takes virtual coordinates."""

    def draw_image(self, image: Any, x: float, y: float, w: float, h: float) -> None: ...

    def draw_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, w: float, color: Color
    ) -> None: ...

    def draw_text(
        self,
        text: str,
        size: float,
        x: float,
        y: float,
        font: Any,
        align: str,
        color: Color,
    ) -> None: ...

    def get_font(self, name: str) -> Any: ...

    def translate(self, d: float) -> float: ...

    def fill(self, color: Color) -> None: ...


@dataclass
class Button:
    """A clickable rectangle, optionally with an image and a caption."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    name: str = ""
    disabled: bool = False
    pressed: bool = False
    text: str = ""
    font_size: float = 0.0
    text_color: Color = WHITE
    bg_color: Color = TRANSPARENT
    bg_image: Optional[Any] = None
    pressed_color: Color = TRANSPARENT
    disabled_color: Color = TRANSPARENT

    def check_click(self, x: float, y: float) -> bool:
        """Whether an enabled button contains the point (edges included)."""
        return (
            not self.disabled
            and self.x <= x <= self.x + self.w
            and self.y <= y <= self.y + self.h
        )

    def draw(self, renderer: Renderer) -> None:
        if self.bg_image is None:
            if self.disabled:
                color = self.disabled_color
            elif self.pressed:
                color = self.pressed_color
            else:
                color = self.bg_color
            renderer.draw_rect(self.x, self.y, self.w, self.h, color)
        else:
            renderer.draw_image(self.bg_image, self.x, self.y, self.w, self.h)

        if self.text:
            renderer.draw_text(
                self.text,
                self.font_size,
                self.x + self.w / 2,
                self.y,
                renderer.get_font("button"),
                "center",
                self.text_color,
            )


@dataclass
class Slider:
    """A horizontal slider whose value is set by holding the mouse on it."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    value: float = 0.0
    name: str = ""
    pressed: bool = False
    line_color: Color = WHITE
    slider_color: Color = WHITE

    def collides(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h

    def update(self, mouse_pos: Tuple[float, float], mouse_held: bool) -> bool:
        """Move the handle to the mouse; return True if the value changed."""
        x, y = mouse_pos
        if not mouse_held or not self.collides(x, y):
            return False

        self.value = min((x - self.x) / (self.w - SLIDER_HANDLE_WIDTH), 1.0)
        return True

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_rect(self.x, self.y + self.h / 4, self.w, self.h / 2, self.line_color)
        renderer.draw_rect(
            self.x + self.value * (self.w - SLIDER_HANDLE_WIDTH),
            self.y,
            SLIDER_HANDLE_WIDTH,
            self.h,
            self.slider_color,
        )


@dataclass
class StaticText:
    """A fixed piece of text at a virtual position."""

    text: str = ""
    x: float = 0.0
    y: float = 0.0
    color: Color = WHITE
    font: Optional[Any] = None
    size: float = 0.0
    align: str = "left"

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_text(
            self.text, self.size, self.x, self.y, self.font, self.align, self.color
        )