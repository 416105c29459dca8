"""Line records and the raw/rendered column mapping."""

from __future__ import annotations

from dataclasses import dataclass, field

from kilo_engine.config import TAB_STOP

_TAB = 0x09
_SPACE = 0x20


def expand_tabs(raw: bytes | bytearray, tab_stop: int = TAB_STOP) -> bytearray:
    """Return ``raw`` with every tab replaced by spaces up to the next stop."""

    rendered = bytearray()
    for byte in raw:
        if byte == _TAB:
            rendered.append(_SPACE)
            while len(rendered) % tab_stop:
                rendered.append(_SPACE)
        else:
            rendered.append(byte)
    return rendered


@dataclass(slots=True)
class Row:
    """One document line: raw bytes plus their cached display form.

    ``render`` must be rebuilt through :meth:`update_render` after every
    mutation of ``raw``; the document's mutators take care of that.
    """

    raw: bytearray = field(default_factory=bytearray)
    tab_stop: int = TAB_STOP
    render: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.raw = bytearray(self.raw)
        self.update_render()

    def update_render(self) -> None:
        self.render = expand_tabs(self.raw, self.tab_stop)

    @property
    def size(self) -> int:
        return len(self.raw)

    @property
    def render_size(self) -> int:
        return len(self.render)


def row_to_render(row: Row, cx: int) -> int:
    """Translate raw column ``cx`` into its rendered column ``rx``."""

    tab_stop = row.tab_stop
    rx = 0
    for byte in row.raw[: max(0, cx)]:
        if byte == _TAB:
            rx += (tab_stop - 1) - (rx % tab_stop)
        rx += 1
    return rx


def render_to_row(row: Row, rx: int) -> int:
    """Translate rendered column ``rx`` back to the raw column containing it."""

    tab_stop = row.tab_stop
    cur_rx = 0
    for cx, byte in enumerate(row.raw):
        if byte == _TAB:
            cur_rx += (tab_stop - 1) - (cur_rx % tab_stop)
        cur_rx += 1
        if cur_rx > rx:
            return cx
    return row.size


__all__ = ["Row", "expand_tabs", "render_to_row", "row_to_render"]
