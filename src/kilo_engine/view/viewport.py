"""Scrolling window over the document."""

from __future__ import annotations

from dataclasses import dataclass

from kilo_engine.buffer import Buffer

# Status bar and message bar.
RESERVED_ROWS = 2


@dataclass(slots=True)
class Viewport:
    """Visible text area; ``rows`` excludes the two reserved bottom lines."""

    rows: int = 0
    cols: int = 0
    row_offset: int = 0
    col_offset: int = 0

    @classmethod
    def for_terminal(cls, screen_rows: int, screen_cols: int) -> "Viewport":
        return cls(rows=max(0, screen_rows - RESERVED_ROWS), cols=max(0, screen_cols))

    def resize(self, screen_rows: int, screen_cols: int) -> None:
        self.rows = max(0, screen_rows - RESERVED_ROWS)
        self.cols = max(0, screen_cols)

    @property
    def is_empty(self) -> bool:
        return self.rows <= 0 or self.cols <= 0

    def scroll(self, buffer: Buffer) -> int:
        """Refresh ``buffer.cursor.rx`` and move the offsets just enough to show it."""

        cursor = buffer.cursor
        cursor.rx = buffer.render_column()
        if self.is_empty:
            return cursor.rx

        if cursor.cy < self.row_offset:
            self.row_offset = cursor.cy
        if cursor.cy >= self.row_offset + self.rows:
            self.row_offset = cursor.cy - self.rows + 1
        if cursor.rx < self.col_offset:
            self.col_offset = cursor.rx
        if cursor.rx >= self.col_offset + self.cols:
            self.col_offset = cursor.rx - self.cols + 1
        return cursor.rx

    def force_scroll_to_bottom(self, num_rows: int) -> None:
        """Jump past the end so the next scroll puts the cursor row on top."""

        self.row_offset = num_rows

    def snapshot(self) -> tuple[int, int]:
        return (self.row_offset, self.col_offset)

    def restore(self, offsets: tuple[int, int]) -> None:
        self.row_offset, self.col_offset = offsets


__all__ = ["RESERVED_ROWS", "Viewport"]
