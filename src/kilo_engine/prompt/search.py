"""Incremental, wraparound search driven by the prompt callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kilo_engine.context import EditorContext
from kilo_engine.keys import ENTER, ESC, NEWLINE, Key
from kilo_engine.runtime import telemetry

from .engine import prompt

SEARCH_PROMPT = "Search: {} (Use ESC/Arrows/Enter)"

FORWARD = 1
BACKWARD = -1

_FORWARD_KEYS = frozenset({Key.ARROW_RIGHT, Key.ARROW_DOWN})
_BACKWARD_KEYS = frozenset({Key.ARROW_LEFT, Key.ARROW_UP})
_END_KEYS = frozenset({ENTER, NEWLINE, ESC})


@dataclass(slots=True)
class SearchMatch:
    row: int
    column: int


class IncrementalSearch:
    """Prompt callback that moves the cursor to the next match as you type.

    State lives only as long as this object, i.e. one prompt session.
    """

    def __init__(self, context: EditorContext) -> None:
        self.context = context
        self.last_match: Optional[int] = None
        self.direction = FORWARD

    def reset(self) -> None:
        self.last_match = None
        self.direction = FORWARD

    def __call__(self, query: str, key: int) -> None:
        if key in _END_KEYS:
            self.reset()
            return
        if key in _FORWARD_KEYS:
            self.direction = FORWARD
        elif key in _BACKWARD_KEYS:
            self.direction = BACKWARD
        else:
            self.reset()

        if not query:
            return
        match = self.scan(query)
        if match is not None:
            self._reveal(match)

    def scan(self, query: str) -> Optional[SearchMatch]:
        """Find the next row whose rendered text contains ``query``."""

        if self.last_match is None:
            self.direction = FORWARD
        document = self.context.buffer.document
        needle = query.encode("utf-8", errors="replace")
        num_rows = document.num_rows
        current = -1 if self.last_match is None else self.last_match
        for _ in range(num_rows):
            current += self.direction
            if current == -1:
                current = num_rows - 1
            elif current == num_rows:
                current = 0
            column = document.rows[current].render.find(needle)
            if column != -1:
                self.last_match = current
                return SearchMatch(row=current, column=column)
        return None

    def _reveal(self, match: SearchMatch) -> None:
        context = self.context
        context.buffer.place_at_render(match.row, match.column)
        context.viewport.force_scroll_to_bottom(context.buffer.document.num_rows)
        context.bus.emit("search.match", match)
        telemetry.record_event(
            "search.match",
            level="debug",
            data={"row": match.row, "column": match.column},
        )


def find(context: EditorContext) -> Optional[str]:
    """Run one search session; ESC puts cursor and viewport back."""

    saved_cursor = context.buffer.cursor.position
    saved_offsets = context.viewport.snapshot()

    query = prompt(context, SEARCH_PROMPT, IncrementalSearch(context))

    if query is None:
        context.buffer.cursor.set(*saved_cursor)
        context.viewport.restore(saved_offsets)
    return query


__all__ = [
    "BACKWARD",
    "FORWARD",
    "IncrementalSearch",
    "SEARCH_PROMPT",
    "SearchMatch",
    "find",
]
