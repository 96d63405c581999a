"""Keyboard keys and the text that a key press produces."""

from __future__ import annotations

import string
from enum import Enum
from functools import lru_cache

_NAMED_KEYS = [
    ("SLASH", "Slash"),
    ("BACKSLASH", "Backslash"),
    ("QUOTE", "Quote"),
    ("BACKQUOTE", "Backquote"),
    ("TAB", "Tab"),
    ("BRACKET_LEFT", "BracketLeft"),
    ("BRACKET_RIGHT", "BracketRight"),
    ("SPACE", "Space"),
    ("EQUAL", "Equal"),
    ("MINUS", "Minus"),
    ("SEMICOLON", "Semicolon"),
    ("COMMA", "Comma"),
    ("PERIOD", "Period"),
    ("ENTER", "Enter"),
    ("BACKSPACE", "Backspace"),
    ("DELETE", "Delete"),
    ("END", "End"),
    ("HOME", "Home"),
    ("ARROW_LEFT", "ArrowLeft"),
    ("ARROW_RIGHT", "ArrowRight"),
    ("ARROW_UP", "ArrowUp"),
    ("ARROW_DOWN", "ArrowDown"),
    ("INSERT", "Insert"),
    ("PAGE_UP", "PageUp"),
    ("PAGE_DOWN", "PageDown"),
    ("ESCAPE", "Escape"),
    ("CAPS_LOCK", "CapsLock"),
    ("CONTROL", "Control"),
    ("ALT", "Alt"),
    ("NUM_LOCK", "NumLock"),
    ("CONTEXT_MENU", "ContextMenu"),
    ("SHIFT_LEFT", "ShiftLeft"),
    ("SHIFT_RIGHT", "ShiftRight"),
    ("META_LEFT", "MetaLeft"),
    ("META_RIGHT", "MetaRight"),
]

Key = Enum(
    "Key",
    [(c, c) for c in string.ascii_uppercase]
    + [(f"DIGIT_{d}", f"Digit{d}") for d in range(10)]
    + [(f"NUMPAD_{d}", f"Numpad{d}") for d in range(10)]
    + [(f"F{n}", f"F{n}") for n in range(1, 13)]
    + _NAMED_KEYS,
    module=__name__,
)
Key.__doc__ = "A keyboard key; its value is the key's display name."

_NUMPAD = {Key[f"NUMPAD_{d}"] for d in range(10)}
_SILENT = {Key.META_LEFT, Key.META_RIGHT} | _NUMPAD
_SHIFT_SILENT = _SILENT | {Key.SHIFT_LEFT, Key.SHIFT_RIGHT}

_PLAIN = {
    Key.SLASH: "/",
    Key.BACKSLASH: "\\",
    Key.QUOTE: "'",
    Key.TAB: "  ",
    Key.BRACKET_LEFT: "[",
    Key.BRACKET_RIGHT: "]",
    Key.SPACE: " ",
    Key.EQUAL: "=",
    Key.MINUS: "-",
    Key.SEMICOLON: ";",
    Key.COMMA: ",",
    Key.PERIOD: ".",
    Key.ENTER: "\n",
}
_PLAIN.update({Key[f"DIGIT_{d}"]: str(d) for d in range(10)})

_SHIFTED = {
    Key.SLASH: "?",
    Key.BACKSLASH: "|",
    Key.QUOTE: '"',
    Key.TAB: "  ",
    Key.BRACKET_LEFT: "{",
    Key.BRACKET_RIGHT: "}",
    Key.SPACE: " ",
    Key.EQUAL: "+",
    Key.MINUS: "_",
    Key.SEMICOLON: ":",
    Key.ENTER: "\n",
    Key.COMMA: "<",
    Key.PERIOD: ">",
}
_SHIFTED.update({Key[f"DIGIT_{d}"]: ch for d, ch in zip(range(10), ")!@#$%^&*(")})


def key_text(key: Key, shift: bool = False, ctrl: bool = False) -> str | None:
    """Return the text a press of ``key`` produces, or None when it produces none.

    Shift takes precedence over Ctrl; with Ctrl held the text is ``"Ctrl"``.
    Keys without a special mapping give their name, lower case unless shifted.
    """
    if shift:
        if key in _SHIFT_SILENT:
            return None
        return _SHIFTED.get(key, key.value)

    if ctrl:
        return "Ctrl"

    if key in _SILENT:
        return None
    return _PLAIN.get(key, key.value.lower())


_PYGAME_NAMES = [
    ("K_SLASH", Key.SLASH),
    ("K_BACKSLASH", Key.BACKSLASH),
    ("K_QUOTE", Key.QUOTE),
    ("K_BACKQUOTE", Key.BACKQUOTE),
    ("K_TAB", Key.TAB),
    ("K_LEFTBRACKET", Key.BRACKET_LEFT),
    ("K_RIGHTBRACKET", Key.BRACKET_RIGHT),
    ("K_SPACE", Key.SPACE),
    ("K_EQUALS", Key.EQUAL),
    ("K_MINUS", Key.MINUS),
    ("K_SEMICOLON", Key.SEMICOLON),
    ("K_COMMA", Key.COMMA),
    ("K_PERIOD", Key.PERIOD),
    ("K_RETURN", Key.ENTER),
    ("K_KP_ENTER", Key.ENTER),
    ("K_BACKSPACE", Key.BACKSPACE),
    ("K_DELETE", Key.DELETE),
    ("K_END", Key.END),
    ("K_HOME", Key.HOME),
    ("K_LEFT", Key.ARROW_LEFT),
    ("K_RIGHT", Key.ARROW_RIGHT),
    ("K_UP", Key.ARROW_UP),
    ("K_DOWN", Key.ARROW_DOWN),
    ("K_INSERT", Key.INSERT),
    ("K_PAGEUP", Key.PAGE_UP),
    ("K_PAGEDOWN", Key.PAGE_DOWN),
    ("K_ESCAPE", Key.ESCAPE),
    ("K_CAPSLOCK", Key.CAPS_LOCK),
    ("K_LCTRL", Key.CONTROL),
    ("K_RCTRL", Key.CONTROL),
    ("K_LALT", Key.ALT),
    ("K_RALT", Key.ALT),
    ("K_NUMLOCK", Key.NUM_LOCK),
    ("K_NUMLOCKCLEAR", Key.NUM_LOCK),
    ("K_MENU", Key.CONTEXT_MENU),
    ("K_LSHIFT", Key.SHIFT_LEFT),
    ("K_RSHIFT", Key.SHIFT_RIGHT),
    ("K_LMETA", Key.META_LEFT),
    ("K_RMETA", Key.META_RIGHT),
    ("K_LGUI", Key.META_LEFT),
    ("K_RGUI", Key.META_RIGHT),
]
_PYGAME_NAMES += [(f"K_{c.lower()}", Key[c]) for c in string.ascii_uppercase]
_PYGAME_NAMES += [(f"K_{d}", Key[f"DIGIT_{d}"]) for d in range(10)]
_PYGAME_NAMES += [(f"K_KP{d}", Key[f"NUMPAD_{d}"]) for d in range(10)]
_PYGAME_NAMES += [(f"K_KP_{d}", Key[f"NUMPAD_{d}"]) for d in range(10)]
_PYGAME_NAMES += [(f"K_F{n}", Key[f"F{n}"]) for n in range(1, 13)]


@lru_cache(maxsize=1)
def _pygame_table() -> dict[int, Key]:
    import pygame

    table: dict[int, Key] = {}
    for name, key in _PYGAME_NAMES:
        code = getattr(pygame, name, None)
        if code is not None:
            table.setdefault(code, key)
    return table


def key_from_pygame(code: int) -> Key | None:
    """Map a pygame key code to a Key, or None if it has no counterpart."""
    return _pygame_table().get(code)