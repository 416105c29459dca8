"""Key token → action registry and default bindings."""

from .models import ActionRef, Binding, normalize_token
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "load_default_keymaps",
    "normalize_token",
]
