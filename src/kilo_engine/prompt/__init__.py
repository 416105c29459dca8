"""Prompt engine and the incremental search layered on it."""

from .engine import PromptCallback, prompt
from .search import BACKWARD, FORWARD, IncrementalSearch, SearchMatch, find

__all__ = [
    "BACKWARD",
    "FORWARD",
    "IncrementalSearch",
    "PromptCallback",
    "SearchMatch",
    "find",
    "prompt",
]
