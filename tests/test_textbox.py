import pytest

from gamebox.keys import Key
from gamebox.textbox import InlineTextBox, TextBox
from gamebox.widgets import WHITE


class FakeRenderer:
    def __init__(self):
        self.calls = []

    def draw_image(self, image, x, y, w, h):
        self.calls.append(("image", image, x, y, w, h))

    def draw_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def draw_line(self, x1, y1, x2, y2, w, color):
        self.calls.append(("line", x1, y1, x2, y2, w, color))

    def draw_text(self, text, size, x, y, font, align, color):
        self.calls.append(("text", text, size, x, y, font, align, color))

    def get_font(self, name):
        return f"font:{name}"

    def translate(self, d):
        return d

    def fill(self, color):
        self.calls.append(("fill", color))


def typed(box, *keys, shift=False):
    for key in keys:
        box.handle_key(key, shift=shift)
    return box


def test_inline_check_click_toggles_active():
    box = InlineTextBox(x=0, y=0, w=10, h=5)
    assert box.check_click(5, 2) is True
    assert box.active is True
    assert box.check_click(5, 2) is True
    assert box.active is False


def test_inline_click_outside_keeps_state():
    box = InlineTextBox(x=0, y=0, w=10, h=5, active=True)
    assert box.check_click(50, 50) is False
    assert box.active is True


def test_inline_inactive_ignores_keys():
    box = typed(InlineTextBox(), Key.A)
    assert box.text == ""


def test_inline_typing_and_shift():
    box = typed(InlineTextBox(active=True), Key.H, Key.I)
    typed(box, Key.DIGIT_1, shift=True)
    assert box.text == "hi!"
    assert box.key_pos == len(box.text)


def test_inline_tab_advances_two():
    box = typed(InlineTextBox(active=True), Key.TAB)
    assert box.text == "  "
    assert box.key_pos == 2


def test_inline_backspace_and_delete():
    box = InlineTextBox(active=True, text="abc", key_pos=2)
    box.handle_key(Key.BACKSPACE)
    assert (box.text, box.key_pos) == ("ac", 1)
    box.handle_key(Key.DELETE)
    assert (box.text, box.key_pos) == ("a", 1)
    box.handle_key(Key.DELETE)
    assert box.text == "a"


def test_inline_backspace_at_start_does_nothing():
    box = InlineTextBox(active=True, text="abc", key_pos=0)
    box.handle_key(Key.BACKSPACE)
    assert (box.text, box.key_pos) == ("abc", 0)


def test_inline_cursor_movement_is_bounded():
    box = InlineTextBox(active=True, text="abc", key_pos=1)
    typed(box, Key.HOME, Key.ARROW_LEFT)
    assert box.key_pos == 0
    typed(box, Key.END, Key.ARROW_RIGHT)
    assert box.key_pos == 3
    typed(box, Key.ARROW_LEFT, Key.ARROW_UP, Key.ARROW_DOWN)
    assert box.key_pos == 2


def test_inline_insert_in_middle():
    box = InlineTextBox(active=True, text="ac", key_pos=1)
    box.handle_key(Key.B)
    assert (box.text, box.key_pos) == ("abc", 2)


@pytest.mark.parametrize("key", [Key.ESCAPE, Key.INSERT, Key.CAPS_LOCK, Key.NUMPAD_3, Key.META_LEFT])
def test_inline_ignored_keys(key):
    box = InlineTextBox(active=True, text="x", key_pos=1)
    box.handle_key(key)
    assert (box.text, box.key_pos) == ("x", 1)


def test_inline_enter_deactivates():
    box = InlineTextBox(active=True, text="x", key_pos=1)
    box.handle_key(Key.ENTER)
    assert box.active is False
    assert box.text == "x"


def test_inline_draw_active_underline():
    renderer = FakeRenderer()
    InlineTextBox(x=1, y=2, w=10, h=4, text="hi", font_size=3, active=True).draw(renderer)
    assert renderer.calls[1] == ("text", "hi", 3, 5, 4, "font:textBox", "left", WHITE)
    assert renderer.calls[2] == ("line", 1, 6, 11, 6, 1, WHITE)


def test_textbox_enter_splits_line():
    box = TextBox(active=True, lines=["hello"], key_pos_x=2)
    box.handle_key(Key.ENTER)
    assert box.lines == ["he", "llo"]
    assert (box.key_pos_x, box.key_pos_y) == (0, 1)


def test_textbox_enter_at_end_adds_empty_line():
    box = TextBox(active=True, lines=["ab"], key_pos_x=2)
    box.handle_key(Key.ENTER)
    assert box.lines == ["ab", ""]
    assert box.key_pos_y == 1


def test_textbox_enter_then_backspace_round_trip():
    box = TextBox(active=True, lines=["hello"], key_pos_x=3)
    typed(box, Key.ENTER, Key.BACKSPACE)
    assert box.lines == ["hello"]
    assert box.key_pos_y == 0


def test_textbox_backspace_within_line():
    box = TextBox(active=True, lines=["ab", "cd"], key_pos_x=1, key_pos_y=1)
    box.handle_key(Key.BACKSPACE)
    assert box.lines == ["ab", "d"]
    assert box.key_pos_x == 0


def test_textbox_backspace_at_very_start_does_nothing():
    box = TextBox(active=True, lines=["ab"], key_pos_x=0)
    box.handle_key(Key.BACKSPACE)
    assert box.lines == ["ab"]


def test_textbox_delete_joins_next_line():
    box = TextBox(active=True, lines=["ab", "cd"], key_pos_x=2)
    box.handle_key(Key.DELETE)
    assert box.lines == ["abcd"]


def test_textbox_delete_at_end_of_text_does_nothing():
    box = TextBox(active=True, lines=["ab", "cd"], key_pos_x=2, key_pos_y=1)
    box.handle_key(Key.DELETE)
    assert box.lines == ["ab", "cd"]


def test_textbox_delete_character():
    box = TextBox(active=True, lines=["abc"], key_pos_x=0)
    box.handle_key(Key.DELETE)
    assert box.lines == ["bc"]


def test_textbox_vertical_movement_clamps():
    box = TextBox(active=True, lines=["long line", "ab"], key_pos_x=8)
    box.handle_key(Key.ARROW_DOWN)
    assert (box.key_pos_x, box.key_pos_y) == (2, 1)
    box.handle_key(Key.ARROW_DOWN)
    assert box.key_pos_y == 1
    typed(box, Key.ARROW_UP, Key.ARROW_UP)
    assert box.key_pos_y == 0


def test_textbox_left_at_line_start_moves_up():
    box = TextBox(active=True, lines=["ab", "cd"], key_pos_x=0, key_pos_y=1)
    box.handle_key(Key.ARROW_LEFT)
    assert (box.key_pos_x, box.key_pos_y) == (0, 0)


def test_textbox_typing_and_home_end():
    box = typed(TextBox(active=True), Key.A, Key.B, Key.HOME)
    assert box.key_pos_x == 0
    box.handle_key(Key.END)
    assert box.lines == ["ab"]
    assert box.key_pos_x == 2


def test_textbox_inactive_ignores_keys():
    box = typed(TextBox(), Key.A, Key.ENTER)
    assert box.lines == [""]


def test_textbox_check_click_toggles():
    box = TextBox(x=0, y=0, w=10, h=10)
    assert box.check_click(1, 1) is True
    assert box.active is True


def test_textbox_draw_lines_and_marker():
    renderer = FakeRenderer()
    TextBox(x=0, y=0, w=20, h=10, lines=["a", "b"], font_size=3, active=True).draw(renderer)
    texts = [call for call in renderer.calls if call[0] == "text"]
    assert [call[1] for call in texts] == ["a", "b"]
    assert texts[1][4] - texts[0][4] == 5
    assert renderer.calls[-1] == ("line", 0, 10, 20, 0, 1, WHITE)