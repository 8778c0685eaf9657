"""Terminal styling, status messages and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading
from typing import TextIO

_RESET = "\x1b[0m"


def _colors_enabled() -> bool:
    if os.environ.get("CLICOLOR_FORCE", "0") != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _style(text: object, code: str) -> str:
    text = str(text)
    if _colors_enabled():
        return f"\x1b[{code}m{text}{_RESET}"
    return text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def bold(text: object) -> str:
    """Render text in bold when colours are enabled."""
    return _style(text, "1")


def blue(text: object) -> str:
    """Render text in blue when colours are enabled."""
    return _style(text, "34")


def _red(text: object) -> str:
    return _style(text, "31")


def _green(text: object) -> str:
    return _style(text, "32")


def warn(message: str) -> None:
    """Print a warning line in red."""
    mark = "!" if no_emoji() else "⚠️ "
    print(f"{_red(mark)} {_red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    mark = "✓" if no_emoji() else "✅"
    print(f"{_green(mark)} {_green(message)}")


class _Spinner:
    """A spinner drawn on stderr while a long step runs; silent off a terminal."""

    _FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

    def __init__(self, message: str, stream: TextIO | None = None, interval: float = 0.1):
        self._stream = stream if stream is not None else sys.stderr
        self._message = message
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        isatty = getattr(self._stream, "isatty", None)
        if isatty and isatty():
            self._thread = threading.Thread(target=self._spin, args=(interval,), daemon=True)
            self._thread.start()

    def _spin(self, interval: float) -> None:
        for frame in itertools.cycle(self._FRAMES):
            self._stream.write(f"\r\x1b[2K{frame} {self._message}")
            self._stream.flush()
            if self._stop.wait(interval):
                return

    def set_message(self, message: str) -> None:
        self._message = message

    def finish_and_clear(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self._stream.write("\r\x1b[2K")
        self._stream.flush()

    def __enter__(self) -> "_Spinner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()