"""Raw-mode terminal session: the editor's byte source and frame sink."""

from __future__ import annotations

import os
import termios
from contextlib import AbstractContextManager
from typing import List, Optional

from kilo_engine.runtime import telemetry

from . import ansi


class TerminalError(RuntimeError):
    """Unrecoverable terminal failure; the editor cannot render safely."""

    def __init__(self, operation: str, *, cause: Optional[BaseException] = None) -> None:
        detail = f"{operation}: {cause}" if cause else operation
        super().__init__(detail)
        self.operation = operation


class TerminalSession(AbstractContextManager["TerminalSession"]):
    """Puts the tty into byte-at-a-time mode and restores it on exit."""

    def __init__(
        self,
        stdin_fd: int,
        stdout_fd: int,
        *,
        read_timeout_ds: int = 1,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.read_timeout_ds = read_timeout_ds
        self._original: Optional[List] = None
        self.logger = telemetry.get_logger("kilo_engine.terminal")

    def __enter__(self) -> "TerminalSession":
        self.enable_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.disable_raw_mode()
        return False

    def enable_raw_mode(self) -> None:
        try:
            self._original = termios.tcgetattr(self.stdin_fd)
            raw = termios.tcgetattr(self.stdin_fd)
            raw[0] &= ~(
                termios.BRKINT
                | termios.ICRNL
                | termios.INPCK
                | termios.ISTRIP
                | termios.IXON
            )
            raw[1] &= ~termios.OPOST
            raw[2] |= termios.CS8
            raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
            raw[6][termios.VMIN] = 0
            raw[6][termios.VTIME] = self.read_timeout_ds
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalError("tcsetattr", cause=exc) from exc

    def disable_raw_mode(self) -> None:
        if self._original is None:
            return
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._original)
        except termios.error as exc:
            raise TerminalError("tcsetattr", cause=exc) from exc
        finally:
            self._original = None

    def read_byte(self) -> Optional[int]:
        try:
            data = os.read(self.stdin_fd, 1)
        except (BlockingIOError, InterruptedError):
            return None
        except OSError as exc:
            raise TerminalError("read", cause=exc) from exc
        if not data:
            return None
        return data[0]

    def write(self, frame: bytes) -> int:
        """Write ``frame`` in one call; partial writes are not retried."""

        try:
            return os.write(self.stdout_fd, frame)
        except OSError as exc:
            self.logger.warning(f"terminal write failed: {exc}")
            return 0

    def clear_screen(self) -> None:
        self.write(ansi.ERASE_DISPLAY + ansi.CURSOR_HOME)


__all__ = ["TerminalError", "TerminalSession"]
