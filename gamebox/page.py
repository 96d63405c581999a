"""A screen of widgets that are updated and drawn together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from gamebox.keys import Key
from gamebox.textbox import InlineTextBox, TextBox
from gamebox.widgets import BLACK, WHITE, Button, Color, Renderer, Slider, StaticText

TITLE_SIZE = 8


@dataclass
class Page:
    """A menu or game screen: title, background and interactive content."""

    title: str = ""
    buttons: List[Button] = field(default_factory=list)
    sliders: List[Slider] = field(default_factory=list)
    text: List[StaticText] = field(default_factory=list)
    inline_text_boxes: List[InlineTextBox] = field(default_factory=list)
    text_boxes: List[TextBox] = field(default_factory=list)
    bg_draw: bool = False
    bg_color: Color = BLACK
    bg_image: Optional[Any] = None

    def update(
        self,
        mouse_pos: Tuple[float, float],
        mouse_held: bool = False,
        mouse_clicked: bool = False,
        key: Optional[Key] = None,
        shift: bool = False,
        ctrl: bool = False,
    ) -> Tuple[str, Optional[Button], Optional[Slider]]:
        """Feed one frame of input to the content.

        Returns the name of the slider moved or button clicked, with that
        widget; the name is empty when nothing was activated.
        """
        for slider in self.sliders:
            if slider.update(mouse_pos, mouse_held):
                return slider.name, None, slider

        for box in self.inline_text_boxes:
            box.handle_key(key, shift, ctrl)
        for box in self.text_boxes:
            box.handle_key(key, shift, ctrl)

        if not mouse_clicked:
            return "", None, None

        x, y = mouse_pos
        for button in self.buttons:
            if button.check_click(x, y):
                return button.name, button, None

        for box in self.inline_text_boxes:
            box.check_click(x, y)
        for box in self.text_boxes:
            box.check_click(x, y)

        return "", None, None

    def draw(self, renderer: Renderer) -> None:
        if self.bg_draw:
            if self.bg_image is not None:
                renderer.draw_image(self.bg_image, 0, 0, 100, 50)
            else:
                renderer.fill(self.bg_color)

        if self.title:
            renderer.draw_text(
                self.title, TITLE_SIZE, 50, 1, renderer.get_font("default"), "center", WHITE
            )

        for item in self.text:
            item.draw(renderer)
        for button in self.buttons:
            button.draw(renderer)
        for slider in self.sliders:
            slider.draw(renderer)
        for box in self.inline_text_boxes:
            box.draw(renderer)
        for box in self.text_boxes:
            box.draw(renderer)