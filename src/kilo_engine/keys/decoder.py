"""Escape-sequence decoder turning raw terminal bytes into keys."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from .models import ESC, Key

_CSI_LETTERS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
    ord("H"): Key.HOME,
    ord("F"): Key.END,
}

_CSI_TILDE = {
    ord("1"): Key.HOME,
    ord("3"): Key.DEL,
    ord("4"): Key.END,
    ord("5"): Key.PAGE_UP,
    ord("6"): Key.PAGE_DOWN,
    ord("7"): Key.HOME,
    ord("8"): Key.END,
}

_SS3_LETTERS = {
    ord("H"): Key.HOME,
    ord("F"): Key.END,
}


class ByteSource(Protocol):
    """Blocking-with-timeout input the decoder pulls bytes from."""

    def read_byte(self) -> Optional[int]:
        """Return the next byte, or ``None`` when the read timed out."""
        ...


class KeyDecoder:
    """Reads one logical key per call from a :class:`ByteSource`.

    ``on_idle`` runs after every read that timed out while waiting for
    the first byte of a key.
    """

    def __init__(
        self,
        source: ByteSource,
        *,
        on_idle: Optional[Callable[[], None]] = None,
    ) -> None:
        self.source = source
        self.on_idle = on_idle

    def read_key(self) -> int:
        byte = self.source.read_byte()
        while byte is None:
            if self.on_idle is not None:
                self.on_idle()
            byte = self.source.read_byte()
        if byte != ESC:
            return byte
        return self._decode_escape()

    def _decode_escape(self) -> int:
        first = self.source.read_byte()
        if first is None:
            return ESC
        second = self.source.read_byte()
        if second is None:
            return ESC

        if first == ord("["):
            if ord("0") <= second <= ord("9"):
                third = self.source.read_byte()
                if third != ord("~"):
                    return ESC
                return _CSI_TILDE.get(second, ESC)
            return _CSI_LETTERS.get(second, ESC)

        if first == ord("O"):
            return _SS3_LETTERS.get(second, ESC)

        return ESC


__all__ = ["ByteSource", "KeyDecoder"]
