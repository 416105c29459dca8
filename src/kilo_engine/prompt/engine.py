"""Single-line input on the message bar with a per-keystroke hook."""

from __future__ import annotations

from typing import Callable, Optional

from kilo_engine.context import EditorContext
from kilo_engine.keys import BACKSPACE, ENTER, ESC, NEWLINE, Key, ctrl, is_control
from kilo_engine.runtime import telemetry

PromptCallback = Callable[[str, int], None]

_ERASE_KEYS = frozenset({BACKSPACE, ctrl("h"), Key.DEL})
_COMMIT_KEYS = frozenset({ENTER, NEWLINE})


def prompt(
    context: EditorContext,
    template: str,
    callback: Optional[PromptCallback] = None,
) -> Optional[str]:
    """Collect a line of input; ``None`` when the user cancels with ESC.

    ``template`` carries one ``{}`` placeholder for the text typed so far.
    ``callback`` sees the text and the key after every keystroke,
    including the one that ends the session.
    """

    logger = telemetry.get_logger("kilo_engine.prompt")
    typed: list[str] = []
    while True:
        text = "".join(typed)
        context.set_status(template.format(text))
        context.refresh_screen()
        key = context.read_key()

        if key in _ERASE_KEYS:
            if typed:
                typed.pop()
        elif key == ESC:
            context.set_status("")
            if callback is not None:
                callback(text, key)
            logger.debug("prompt cancelled")
            return None
        elif key in _COMMIT_KEYS:
            if typed:
                context.set_status("")
                if callback is not None:
                    callback(text, key)
                return text
        elif not is_control(key) and key < 128:
            typed.append(chr(key))

        if callback is not None:
            callback("".join(typed), key)


__all__ = ["PromptCallback", "prompt"]
