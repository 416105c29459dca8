from __future__ import annotations

import random

from kilo_engine import __version__
from kilo_engine.buffer import Buffer, CursorState
from kilo_engine.terminal import ansi
from kilo_engine.view import (
    StatusMessage,
    Viewport,
    compose_frame,
    status_bar,
    welcome_banner,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def make_buffer(*lines: bytes, cx: int = 0, cy: int = 0) -> Buffer:
    buffer = Buffer.from_lines(lines)
    buffer.cursor = CursorState(cx=cx, cy=cy)
    return buffer


def test_scroll_down_moves_offset_minimally() -> None:
    buffer = make_buffer(*[b"line"] * 50, cy=12)
    viewport = Viewport(rows=10, cols=20)

    viewport.scroll(buffer)
    assert viewport.row_offset == 3

    buffer.cursor.cy = 13
    viewport.scroll(buffer)
    assert viewport.row_offset == 4

    buffer.cursor.cy = 8
    viewport.scroll(buffer)
    assert viewport.row_offset == 4

    buffer.cursor.cy = 2
    viewport.scroll(buffer)
    assert viewport.row_offset == 2


def test_horizontal_scroll_uses_rendered_column() -> None:
    buffer = make_buffer(b"\t\t\tx", cx=3)
    viewport = Viewport(rows=5, cols=10)

    rx = viewport.scroll(buffer)

    assert rx == 24
    assert buffer.cursor.rx == 24
    assert viewport.col_offset == 15

    buffer.cursor.cx = 0
    viewport.scroll(buffer)
    assert viewport.col_offset == 0


def test_force_scroll_puts_cursor_row_on_top() -> None:
    buffer = make_buffer(*[b"x"] * 30, cy=20)
    viewport = Viewport(rows=10, cols=10)
    viewport.scroll(buffer)
    assert viewport.row_offset == 11

    viewport.force_scroll_to_bottom(buffer.document.num_rows)
    viewport.scroll(buffer)

    assert viewport.row_offset == 20


def test_viewport_always_contains_cursor_after_random_walk() -> None:
    rng = random.Random(7)
    lines = [
        bytes(rng.choice(b"ab\t ") for _ in range(rng.randrange(40)))
        for _ in range(60)
    ]
    buffer = make_buffer(*lines)
    viewport = Viewport(rows=7, cols=13)

    for _ in range(500):
        cursor = buffer.cursor
        cursor.cy = rng.randrange(buffer.document.num_rows + 1)
        row = buffer.document.row(cursor.cy)
        cursor.cx = rng.randrange(row.size + 1) if row else 0
        if rng.random() < 0.3:
            buffer.insert_char(ord("\t"))
        viewport.scroll(buffer)

        assert viewport.row_offset <= cursor.cy < viewport.row_offset + viewport.rows
        assert viewport.col_offset <= cursor.rx < viewport.col_offset + viewport.cols


def test_for_terminal_reserves_status_lines() -> None:
    viewport = Viewport.for_terminal(24, 80)

    assert (viewport.rows, viewport.cols) == (22, 80)


def test_welcome_banner_is_centered() -> None:
    welcome = f"Kilo editor -- version {__version__}".encode()
    padding = (40 - len(welcome)) // 2

    assert welcome_banner(40) == b"~" + b" " * (padding - 1) + welcome
    assert welcome_banner(10) == welcome[:10]


def test_status_bar_layout() -> None:
    buffer = make_buffer()

    assert status_bar(buffer, 40) == b"[No Name] - 0 lines " + b" " * 17 + b"1/0"


def test_status_bar_shows_filename_and_modified_marker() -> None:
    buffer = make_buffer(b"a", b"b")
    buffer.document.filename = "a-really-long-file-name.txt"
    buffer.insert_char(ord("x"))

    bar = status_bar(buffer, 60)

    assert bar.startswith(b"a-really-long-file-n - 2 lines (modified)")
    assert bar.endswith(b" 1/2")
    assert len(bar) == 60


def test_empty_document_frame() -> None:
    buffer = make_buffer()
    viewport = Viewport(rows=6, cols=40)
    viewport.scroll(buffer)

    frame = compose_frame(buffer, viewport, "hello")

    assert frame.startswith(ansi.HIDE_CURSOR + ansi.CURSOR_HOME)
    assert frame.endswith(ansi.cursor_position(1, 1) + ansi.SHOW_CURSOR)
    rows = frame[len(ansi.HIDE_CURSOR + ansi.CURSOR_HOME) :].split(ansi.CRLF)
    assert rows[0] == b"~" + ansi.ERASE_LINE
    assert rows[2] == welcome_banner(40) + ansi.ERASE_LINE
    assert rows[6].startswith(ansi.REVERSE_VIDEO)
    assert rows[7].startswith(ansi.ERASE_LINE + b"hello")


def test_frame_clips_rows_to_viewport_columns() -> None:
    buffer = make_buffer(b"0123456789abcdef", b"\tz", cx=12)
    viewport = Viewport(rows=3, cols=8)
    viewport.scroll(buffer)

    frame = compose_frame(buffer, viewport)

    assert viewport.col_offset == 5
    assert b"56789abc" + ansi.ERASE_LINE in frame
    assert b"   z" + ansi.ERASE_LINE in frame
    assert ansi.cursor_position(1, 8) in frame


def test_status_message_expires_after_ttl() -> None:
    clock = FakeClock()
    message = StatusMessage(ttl=5.0, clock=clock)
    message.set("saved")

    assert message.visible() == "saved"
    clock.now += 4.9
    assert message.visible() == "saved"
    clock.now += 0.2
    assert message.visible() == ""
