"""High-level editing verbs bound to keys."""

from .core import (
    delete_backward,
    delete_forward,
    insert_byte,
    insert_newline,
    move_cursor,
    move_end,
    move_home,
    noop_action,
    page,
)
from .file import quit_editor, save
from .search import start_search

__all__ = [
    "delete_backward",
    "delete_forward",
    "insert_byte",
    "insert_newline",
    "move_cursor",
    "move_end",
    "move_home",
    "noop_action",
    "page",
    "quit_editor",
    "save",
    "start_search",
]
