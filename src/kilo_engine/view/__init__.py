"""Viewport controller, status message and screen compositor."""

from .compositor import compose_frame, status_bar, welcome_banner
from .status import StatusMessage
from .viewport import RESERVED_ROWS, Viewport

__all__ = [
    "RESERVED_ROWS",
    "StatusMessage",
    "Viewport",
    "compose_frame",
    "status_bar",
    "welcome_banner",
]
