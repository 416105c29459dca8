"""Full-frame screen composition.

A frame is built into one ``bytearray`` and handed to the terminal in a
single write: hide cursor, home, text rows, status bar, message bar,
cursor placement, show cursor.
"""

from __future__ import annotations

from kilo_engine import __version__
from kilo_engine.buffer import Buffer
from kilo_engine.terminal import ansi

from .viewport import Viewport

FILENAME_WIDTH = 20
NO_NAME = "[No Name]"


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="replace")


def welcome_banner(cols: int, version: str = __version__) -> bytes:
    welcome = _encode(f"Kilo editor -- version {version}")[:cols]
    padding = (cols - len(welcome)) // 2
    out = bytearray()
    if padding:
        out += b"~"
        padding -= 1
    out += b" " * padding
    out += welcome
    return bytes(out)


def draw_rows(out: bytearray, buffer: Buffer, viewport: Viewport) -> None:
    document = buffer.document
    for y in range(viewport.rows):
        filerow = y + viewport.row_offset
        if filerow >= document.num_rows:
            if document.num_rows == 0 and y == viewport.rows // 3:
                out += welcome_banner(viewport.cols)
            else:
                out += b"~"
        else:
            render = document.rows[filerow].render
            start = viewport.col_offset
            out += render[start : start + viewport.cols]
        out += ansi.ERASE_LINE
        out += ansi.CRLF


def status_bar(buffer: Buffer, cols: int) -> bytes:
    document = buffer.document
    name = (document.filename or NO_NAME)[:FILENAME_WIDTH]
    modified = "(modified)" if document.is_dirty else ""
    left = _encode(f"{name} - {document.num_rows} lines {modified}")[:cols]
    right = _encode(f"{buffer.cursor.cy + 1}/{document.num_rows}")

    out = bytearray(left)
    while len(out) < cols:
        if cols - len(out) == len(right):
            out += right
            break
        out += b" "
    return bytes(out)


def draw_status_bar(out: bytearray, buffer: Buffer, viewport: Viewport) -> None:
    out += ansi.REVERSE_VIDEO
    out += status_bar(buffer, viewport.cols)
    out += ansi.RESET_ATTRIBUTES
    out += ansi.CRLF


def draw_message_bar(out: bytearray, message: str, viewport: Viewport) -> None:
    out += ansi.ERASE_LINE
    if message:
        out += _encode(message)[: viewport.cols]


def compose_frame(buffer: Buffer, viewport: Viewport, message: str = "") -> bytes:
    """Render one frame; ``viewport.scroll`` must have run for this cursor."""

    out = bytearray()
    out += ansi.HIDE_CURSOR
    out += ansi.CURSOR_HOME
    draw_rows(out, buffer, viewport)
    draw_status_bar(out, buffer, viewport)
    draw_message_bar(out, message, viewport)
    cursor = buffer.cursor
    out += ansi.cursor_position(
        cursor.cy - viewport.row_offset + 1,
        cursor.rx - viewport.col_offset + 1,
    )
    out += ansi.SHOW_CURSOR
    return bytes(out)


__all__ = [
    "compose_frame",
    "draw_message_bar",
    "draw_rows",
    "draw_status_bar",
    "status_bar",
    "welcome_banner",
]
