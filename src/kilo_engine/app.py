"""Command line entry point: ``kilo [path]``."""

from __future__ import annotations

import argparse
import signal
import sys
from typing import Any, Optional, Sequence

from kilo_engine import __version__
from kilo_engine.config import HELP_MESSAGE, EditorConfig
from kilo_engine.editor import Editor
from kilo_engine.runtime import telemetry
from kilo_engine.terminal import TerminalError, TerminalSession, window_size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kilo", description="Small terminal text editor."
    )
    parser.add_argument("path", nargs="?", help="file to open")
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        help="telemetry preset (logs go to KILO_ENGINE_LOG_FILE)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _install_resize_handler(editor: Editor, session: TerminalSession) -> Any:
    """Track terminal resizes; returns the handler it replaced.

    The handler only updates the viewport size. The control loop redraws
    with the new geometry on its next pass.
    """

    def on_resize(_signum: int, _frame: object) -> None:
        try:
            rows, cols = window_size(session)
        except TerminalError:
            return
        editor.resize(rows, cols)

    return signal.signal(signal.SIGWINCH, on_resize)


def run(
    path: Optional[str],
    config: EditorConfig,
    *,
    session: Optional[TerminalSession] = None,
) -> int:
    if session is None:
        session = TerminalSession(
            sys.stdin.fileno(),
            sys.stdout.fileno(),
            read_timeout_ds=config.read_timeout_ds,
        )
    try:
        with session:
            rows, cols = window_size(session)
            editor = Editor.create(
                session,
                session.write,
                screen_rows=rows,
                screen_cols=cols,
                config=config,
            )
            editor.context.set_status(HELP_MESSAGE)
            if path:
                editor.open(path)
            previous = _install_resize_handler(editor, session)
            try:
                status = editor.run()
            finally:
                signal.signal(signal.SIGWINCH, previous)
            session.clear_screen()
            return status
    except TerminalError as exc:
        session.clear_screen()
        telemetry.logger.error(f"fatal terminal error: {exc}")
        print(f"kilo: {exc}", file=sys.stderr)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    try:
        config = EditorConfig.from_env()
    except ValueError as exc:
        print(f"kilo: {exc}", file=sys.stderr)
        return 1
    return run(args.path, config)


__all__ = ["build_parser", "main", "run"]
