"""Terminal protocol, raw-mode session and geometry probe."""

from . import ansi
from .geometry import cursor_position, parse_cursor_report, window_size
from .session import TerminalError, TerminalSession

__all__ = [
    "ansi",
    "TerminalError",
    "TerminalSession",
    "cursor_position",
    "parse_cursor_report",
    "window_size",
]
