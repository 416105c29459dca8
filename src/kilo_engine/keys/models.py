"""Key codes produced by the decoder and their binding tokens."""

from __future__ import annotations

from enum import IntEnum

ESC = 0x1B
ENTER = 0x0D
NEWLINE = 0x0A
TAB = 0x09
BACKSPACE = 0x7F


class Key(IntEnum):
    """Named navigation keys; values sit above the byte range."""

    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    DEL = 1004
    HOME = 1005
    END = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


def ctrl(char: str) -> int:
    """Return the byte a terminal sends for Ctrl+``char``."""

    return ord(char) & 0x1F


def is_control(key: int) -> bool:
    return 0 <= key < 0x20 or key == BACKSPACE


def is_named(key: int) -> bool:
    return key >= Key.ARROW_LEFT


def is_insertable(key: int) -> bool:
    """Bytes that go into a line verbatim when no binding claims them."""

    if is_named(key) or key < 0:
        return False
    return key == TAB or not is_control(key)


_SPECIAL_TOKENS = {
    ESC: "ESC",
    ENTER: "ENTER",
    NEWLINE: "ctrl+j",
    TAB: "TAB",
    BACKSPACE: "BACKSPACE",
}


def key_to_token(key: int) -> str:
    """Normalize a decoded key into the token used by keymap bindings."""

    if is_named(key):
        return Key(key).name
    special = _SPECIAL_TOKENS.get(key)
    if special is not None:
        return special
    if key < 0x20:
        return f"ctrl+{chr(key + 0x60)}"
    if key < 0x80:
        return chr(key)
    return f"0x{key:02x}"


__all__ = [
    "BACKSPACE",
    "ENTER",
    "ESC",
    "Key",
    "NEWLINE",
    "TAB",
    "ctrl",
    "is_control",
    "is_insertable",
    "is_named",
    "key_to_token",
]
