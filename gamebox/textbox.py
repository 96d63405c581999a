"""Editable single-line and multi-line text boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from gamebox.keys import Key, key_text
from gamebox.widgets import TRANSPARENT, WHITE, Color, Renderer

_IGNORED_KEYS = frozenset(
    {
        Key.INSERT,
        Key.PAGE_UP,
        Key.PAGE_DOWN,
        Key.ESCAPE,
        Key.CAPS_LOCK,
        Key.CONTROL,
        Key.ALT,
        Key.NUM_LOCK,
        Key.CONTEXT_MENU,
    }
)


@dataclass
class InlineTextBox:
    """A one-line text box that edits while active."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    text: str = ""
    text_color: Color = WHITE
    font_size: float = 0.0
    bg_color: Color = TRANSPARENT
    active: bool = False
    key_pos: int = 0

    def check_click(self, x: float, y: float) -> bool:
        """Toggle activity when clicked; return whether the box was hit."""
        clicked = self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h
        self.active = clicked != self.active
        return clicked

    def handle_key(self, key: Optional[Key], shift: bool = False, ctrl: bool = False) -> None:
        """Apply one key press to the text while the box is active."""
        if not self.active or key is None:
            return
        typed = key_text(key, shift, ctrl)
        if typed is None:
            return

        pos = self.key_pos
        if key in _IGNORED_KEYS or key in (Key.ARROW_UP, Key.ARROW_DOWN):
            return
        if key is Key.ENTER:
            self.active = False
        elif key is Key.BACKSPACE:
            if pos > 0:
                self.text = self.text[: pos - 1] + self.text[pos:]
                self.key_pos -= 1
        elif key is Key.DELETE:
            if self.text and pos != len(self.text):
                self.text = self.text[:pos] + self.text[pos + 1 :]
        elif key is Key.END:
            self.key_pos = len(self.text)
        elif key is Key.HOME:
            self.key_pos = 0
        elif key is Key.ARROW_LEFT:
            if pos > 0:
                self.key_pos -= 1
        elif key is Key.ARROW_RIGHT:
            if pos != len(self.text):
                self.key_pos += 1
        else:
            self.text = self.text[:pos] + typed + self.text[pos:]
            self.key_pos += 2 if key is Key.TAB else 1

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_rect(self.x, self.y, self.w, self.h, self.bg_color)
        renderer.draw_text(
            self.text,
            self.font_size,
            self.x + 4,
            self.y + 2,
            renderer.get_font("textBox"),
            "left",
            self.text_color,
        )
        if self.active:
            renderer.draw_line(
                self.x, self.y + self.h, self.x + self.w, self.y + self.h, 1, WHITE
            )


@dataclass
class TextBox:
    """A multi-line text box that edits while active."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    lines: List[str] = field(default_factory=lambda: [""])
    text_color: Color = WHITE
    font_size: float = 0.0
    bg_color: Color = TRANSPARENT
    active: bool = False
    key_pos_x: int = 0
    key_pos_y: int = 0

    def check_click(self, x: float, y: float) -> bool:
        """Toggle activity when clicked; return whether the box was hit."""
        clicked = self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h
        self.active = clicked != self.active
        return clicked

    def _clamp_column(self) -> None:
        self.key_pos_x = min(self.key_pos_x, len(self.lines[self.key_pos_y]))

    def handle_key(self, key: Optional[Key], shift: bool = False, ctrl: bool = False) -> None:
        """Apply one key press to the lines while the box is active."""
        if not self.active or key is None:
            return
        typed = key_text(key, shift, ctrl)
        if typed is None or key in _IGNORED_KEYS:
            return

        lines = self.lines
        x, y = self.key_pos_x, self.key_pos_y

        if key is Key.ENTER:
            line = lines[y]
            lines.insert(y + 1, line[x:])
            lines[y] = line[:x]
            self.key_pos_y += 1
            self.key_pos_x = 0
        elif key is Key.BACKSPACE:
            if x == 0:
                if y == 0:
                    return
                lines[y - 1] += lines[y]
                del lines[y]
                self.key_pos_y -= 1
                self.key_pos_x = len(lines[self.key_pos_y])
            else:
                lines[y] = lines[y][: x - 1] + lines[y][x:]
                self.key_pos_x -= 1
        elif key is Key.DELETE:
            if x == len(lines[y]):
                if y != len(lines) - 1:
                    lines[y] += lines[y + 1]
                    del lines[y + 1]
            else:
                lines[y] = lines[y][:x] + lines[y][x + 1 :]
        elif key is Key.END:
            self.key_pos_x = len(lines[y])
        elif key is Key.HOME:
            self.key_pos_x = 0
        elif key is Key.ARROW_LEFT:
            if x == 0:
                self.key_pos_y = max(y - 1, 0)
            else:
                self.key_pos_x -= 1
        elif key is Key.ARROW_RIGHT:
            # The line is looked up by column here, so a column past the last
            # line raises IndexError.
            if x == len(lines[x]):
                if y < len(lines):
                    self.key_pos_y += 1
            else:
                self.key_pos_x += 1
        elif key is Key.ARROW_UP:
            self.key_pos_y = max(y - 1, 0)
            self._clamp_column()
        elif key is Key.ARROW_DOWN:
            self.key_pos_y = min(y + 1, len(lines) - 1)
            self._clamp_column()
        else:
            lines[y] = lines[y][:x] + typed + lines[y][x:]
            self.key_pos_x += 2 if key is Key.TAB else 1

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_rect(self.x, self.y, self.w, self.h, self.bg_color)
        font = renderer.get_font("textBox")
        for i, line in enumerate(self.lines):
            renderer.draw_text(
                line,
                self.font_size,
                self.x + 4,
                self.y + 2 + i * (self.font_size + 2),
                font,
                "left",
                self.text_color,
            )
        if self.active:
            renderer.draw_line(self.x, self.y + self.h, self.x + self.w, self.y, 1, WHITE)