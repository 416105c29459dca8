from __future__ import annotations

from collections import deque
from typing import List, Optional, Tuple

from kilo_engine.buffer import Buffer, CursorState
from kilo_engine.context import EditorContext
from kilo_engine.keys import ENTER, ESC, Key, KeyDecoder
from kilo_engine.prompt import IncrementalSearch, SearchMatch, find, prompt
from kilo_engine.view import Viewport

UP = b"\x1b[A"
DOWN = b"\x1b[B"
LEFT = b"\x1b[D"


class ScriptedSource:
    def __init__(self, data: bytes) -> None:
        self._pending = deque(data)

    def read_byte(self) -> Optional[int]:
        return self._pending.popleft() if self._pending else None


def make_context(
    *lines: bytes,
    keys: bytes = b"",
    cx: int = 0,
    cy: int = 0,
    rows: int = 10,
    cols: int = 40,
) -> Tuple[EditorContext, List[bytes]]:
    frames: List[bytes] = []
    buffer = Buffer.from_lines(lines)
    buffer.cursor = CursorState(cx=cx, cy=cy)
    context = EditorContext(
        buffer=buffer,
        viewport=Viewport(rows=rows, cols=cols),
        keys=KeyDecoder(ScriptedSource(keys)),
        output=frames.append,
    )
    return context, frames


def test_prompt_returns_typed_text_on_enter() -> None:
    context, frames = make_context(keys=b"notes.txt\r")

    result = prompt(context, "Save as: {} (ESC to cancel)")

    assert result == "notes.txt"
    assert context.status.text == ""
    assert len(frames) == len("notes.txt") + 1
    assert b"Save as: notes.txt (ESC to cancel)" in frames[-1]


def test_prompt_backspace_edits_and_empty_enter_does_not_commit() -> None:
    context, _ = make_context(keys=b"\r\x7f\x7fab\x7fc\r")

    assert prompt(context, "> {}") == "ac"


def test_prompt_ignores_control_and_non_ascii_bytes() -> None:
    context, _ = make_context(keys=b"a\x02\xc3b\tc\r")

    assert prompt(context, "{}") == "abc"


def test_prompt_escape_cancels() -> None:
    context, _ = make_context(keys=b"abc\x1b")

    assert prompt(context, "{}") is None
    assert context.status.text == ""


def test_prompt_callback_sees_every_key_including_the_last() -> None:
    context, _ = make_context(keys=b"ab\x7f\r")
    calls: List[Tuple[str, int]] = []

    result = prompt(context, "{}", lambda text, key: calls.append((text, key)))

    assert result == "a"
    assert calls == [("a", ord("a")), ("ab", ord("b")), ("a", 127), ("a", ENTER)]


def test_prompt_callback_runs_on_cancel() -> None:
    context, _ = make_context(keys=b"x\x1b")
    calls: List[Tuple[str, int]] = []

    prompt(context, "{}", lambda text, key: calls.append((text, key)))

    assert calls[-1] == ("x", ESC)


def test_search_wraps_to_first_row() -> None:
    context, _ = make_context(b"abc", b"tab\tstop", b"xyz", keys=b"ab\r", cy=2)

    assert find(context) == "ab"
    assert context.buffer.cursor.position == (0, 0)


def test_search_maps_rendered_match_back_to_raw_column() -> None:
    context, _ = make_context(b"abc", b"tab\tstop", keys=b"stop\r")

    find(context)

    assert context.buffer.cursor.position == (4, 1)


def test_search_arrows_step_forward_and_backward_with_wraparound() -> None:
    keys = b"foo" + DOWN + DOWN + UP + LEFT + b"\r"
    context, _ = make_context(b"foo", b"bar", b"foo", b"baz", keys=keys)
    matches: List[SearchMatch] = []
    context.bus.subscribe("search.match", matches.append)

    find(context)

    rows = [match.row for match in matches]
    assert rows == [0, 0, 0, 2, 0, 2, 0]
    assert context.buffer.cursor.position == (0, 0)


def test_search_cancel_restores_cursor_and_viewport() -> None:
    lines = [b"line %d" % i for i in range(40)]
    context, _ = make_context(*lines, keys=b"line 3\x1b", cx=2, cy=25, rows=10)
    context.viewport.scroll(context.buffer)
    before = context.viewport.snapshot()

    assert find(context) is None

    assert context.buffer.cursor.position == (2, 25)
    assert context.viewport.snapshot() == before


def test_search_match_is_scrolled_to_top_of_viewport() -> None:
    lines = [b"row %d" % i for i in range(40)]
    context, _ = make_context(*lines, keys=b"row 30\r", rows=10)

    find(context)
    context.refresh_screen()

    assert context.buffer.cursor.cy == 30
    assert context.viewport.row_offset == 30


def test_search_without_match_leaves_cursor() -> None:
    context, _ = make_context(b"abc", keys=b"zzz\r", cx=1)

    find(context)

    assert context.buffer.cursor.position == (1, 0)


def test_incremental_search_state_resets_on_new_text() -> None:
    context, _ = make_context(b"ab", b"ab", b"ab")
    search = IncrementalSearch(context)

    search("ab", ord("b"))
    search("ab", Key.ARROW_DOWN)
    assert search.last_match == 1
    search("abc", ord("c"))

    assert search.last_match is None
    assert search.direction == 1

