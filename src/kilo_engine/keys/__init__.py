"""Raw byte decoding and key codes."""

from .decoder import ByteSource, KeyDecoder
from .models import (
    BACKSPACE,
    ENTER,
    ESC,
    NEWLINE,
    TAB,
    Key,
    ctrl,
    is_control,
    is_insertable,
    is_named,
    key_to_token,
)

__all__ = [
    "ByteSource",
    "KeyDecoder",
    "Key",
    "BACKSPACE",
    "ENTER",
    "ESC",
    "NEWLINE",
    "TAB",
    "ctrl",
    "is_control",
    "is_insertable",
    "is_named",
    "key_to_token",
]
