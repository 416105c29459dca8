"""One-shot terminal size probe."""

from __future__ import annotations

import os
import re
from typing import Optional, Tuple

from kilo_engine.runtime import telemetry

from . import ansi
from .session import TerminalError, TerminalSession

_REPORT = re.compile(rb"^\x1b\[(\d+);(\d+)$")
_REPORT_LIMIT = 32


def parse_cursor_report(report: bytes) -> Optional[Tuple[int, int]]:
    """Parse ``ESC [ rows ; cols`` (the terminating ``R`` already stripped)."""

    match = _REPORT.match(report)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def cursor_position(session: TerminalSession) -> Tuple[int, int]:
    request = ansi.REQUEST_CURSOR_POSITION
    if session.write(request) != len(request):
        raise TerminalError("cursor position request")

    report = bytearray()
    while len(report) < _REPORT_LIMIT - 1:
        byte = session.read_byte()
        if byte is None or byte == ord("R"):
            break
        report.append(byte)

    position = parse_cursor_report(bytes(report))
    if position is None:
        raise TerminalError("cursor position report")
    return position


def window_size(session: TerminalSession) -> Tuple[int, int]:
    """Return ``(rows, cols)`` of the terminal behind ``session``.

    Falls back to moving the cursor to the far corner and asking the
    terminal where it ended up when the size ioctl is unavailable.
    """

    try:
        size = os.get_terminal_size(session.stdout_fd)
    except OSError:
        size = None

    if size is not None and size.columns > 0:
        rows, cols = size.lines, size.columns
        method = "ioctl"
    else:
        probe = ansi.CURSOR_FAR_BOTTOM_RIGHT
        if session.write(probe) != len(probe):
            raise TerminalError("getWindowSize")
        rows, cols = cursor_position(session)
        method = "cursor_report"

    telemetry.record_event(
        "terminal.geometry",
        data={"rows": rows, "cols": cols, "method": method},
    )
    return rows, cols


__all__ = ["cursor_position", "parse_cursor_report", "window_size"]
