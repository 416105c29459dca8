"""VT100 control sequences written by the editor."""

from __future__ import annotations

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
ERASE_LINE = b"\x1b[K"
ERASE_DISPLAY = b"\x1b[2J"
REVERSE_VIDEO = b"\x1b[7m"
RESET_ATTRIBUTES = b"\x1b[m"
REQUEST_CURSOR_POSITION = b"\x1b[6n"
# Cursor movement stops at the screen edge, so this lands bottom-right.
CURSOR_FAR_BOTTOM_RIGHT = b"\x1b[999C\x1b[999B"
CRLF = b"\r\n"


def cursor_position(row: int, col: int) -> bytes:
    """Absolute positioning with 1-based coordinates."""

    return b"\x1b[%d;%dH" % (row, col)


__all__ = [
    "CRLF",
    "CURSOR_FAR_BOTTOM_RIGHT",
    "CURSOR_HOME",
    "ERASE_DISPLAY",
    "ERASE_LINE",
    "HIDE_CURSOR",
    "REQUEST_CURSOR_POSITION",
    "RESET_ATTRIBUTES",
    "REVERSE_VIDEO",
    "SHOW_CURSOR",
    "cursor_position",
]
