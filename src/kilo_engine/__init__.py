"""Terminal plain-text editor engine: rows, rendering, prompt and search."""

__version__ = "0.1.0"

__all__ = [
    "actions",
    "app",
    "buffer",
    "config",
    "context",
    "editor",
    "keymaps",
    "keys",
    "prompt",
    "runtime",
    "terminal",
    "view",
]
