"""Built-in actions and the key bindings that reach them."""

from __future__ import annotations

from typing import Iterable, Sequence

from kilo_engine.actions import core as core_actions
from kilo_engine.actions import file as file_actions
from kilo_engine.actions import search as search_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.move",
        handler=core_actions.move_cursor,
        description="Move the cursor one step",
    ),
    ActionRef(id="core.home", handler=core_actions.move_home, description="Line start"),
    ActionRef(id="core.end", handler=core_actions.move_end, description="Line end"),
    ActionRef(
        id="core.page",
        handler=core_actions.page,
        description="Scroll one screen up or down",
    ),
    ActionRef(
        id="edit.insert",
        handler=core_actions.insert_byte,
        description="Insert the typed byte (fallback for unbound keys)",
    ),
    ActionRef(
        id="edit.newline",
        handler=core_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=core_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(id="core.noop", handler=core_actions.noop_action),
    ActionRef(
        id="file.save",
        handler=file_actions.save,
        description="Write the document to disk",
    ),
    ActionRef(
        id="file.quit",
        handler=file_actions.quit_editor,
        description="Quit, confirming unsaved changes",
    ),
    ActionRef(
        id="search.find",
        handler=search_actions.start_search,
        description="Incremental search",
    ),
)


def _bind(key: str, action_id: str, description: str = "") -> Binding:
    return Binding(
        id=f"{action_id}:{key}",
        key=key,
        action_id=action_id,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("ENTER", "edit.newline", "Insert newline"),
    _bind("ctrl+q", "file.quit", "Quit"),
    _bind("ctrl+s", "file.save", "Save"),
    _bind("ctrl+f", "search.find", "Find"),
    _bind("HOME", "core.home"),
    _bind("END", "core.end"),
    _bind("BACKSPACE", "edit.delete_backward"),
    _bind("ctrl+h", "edit.delete_backward"),
    _bind("DEL", "edit.delete_forward"),
    _bind("PAGE_UP", "core.page"),
    _bind("PAGE_DOWN", "core.page"),
    _bind("ARROW_UP", "core.move"),
    _bind("ARROW_DOWN", "core.move"),
    _bind("ARROW_LEFT", "core.move"),
    _bind("ARROW_RIGHT", "core.move"),
    _bind("ctrl+l", "core.noop", "Ignored"),
    _bind("ESC", "core.noop", "Ignored"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded or binding.key in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
