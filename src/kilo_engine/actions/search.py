"""Incremental search action."""

from __future__ import annotations

from kilo_engine.context import ActionResult, EditorContext
from kilo_engine.prompt import find


def start_search(context: EditorContext, key: int) -> ActionResult:
    del key
    query = find(context)
    if query is None:
        return ActionResult(status="search_cancel")
    return ActionResult(status="search_accept", message=query)


__all__ = ["start_search"]
