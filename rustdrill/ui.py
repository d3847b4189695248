"""Terminal output helpers: coloured status lines and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading
from typing import TextIO

_CODES = {"bold": "1", "red": "31", "green": "32", "blue": "34"}
_CLEAR_LINE = "\r\x1b[2K"
_FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: object, *styles: str) -> str:
    """Wrap text in ANSI styles when standard output is a terminal."""
    if not styles or not _is_terminal(sys.stdout):
        return str(text)
    codes = ";".join(_CODES[style] for style in styles)
    return f"\x1b[{codes}m{text}\x1b[0m"


def no_emoji() -> bool:
    """Whether the user asked for plain output without emoji."""
    return "NO_EMOJI" in os.environ


def warn(message: str) -> None:
    """Print a red warning line."""
    marker = "!" if no_emoji() else "⚠️ "
    print(_paint(marker, "red"), _paint(message, "red"))


def success(message: str) -> None:
    """Print a green success line."""
    marker = "✓" if no_emoji() else "✅"
    print(_paint(marker, "green"), _paint(message, "green"))


class Spinner:
    """A steadily ticking spinner drawn on a terminal stream.

    Nothing is drawn when the stream is not a terminal.
    """

    def __init__(
        self,
        message: str = "",
        *,
        stream: TextIO | None = None,
        interval: float = 0.1,
    ) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._message = message
        self._interval = interval
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._enabled = _is_terminal(self._stream)
        self._thread: threading.Thread | None = None
        if self._enabled:
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()

    @property
    def active(self) -> bool:
        """Whether the spinner is still ticking."""
        return self._thread is not None and self._thread.is_alive()

    def _spin(self) -> None:
        for frame in itertools.cycle(_FRAMES):
            if self._stop.is_set():
                return
            with self._lock:
                self._stream.write(f"{_CLEAR_LINE}{frame} {self._message}")
                self._stream.flush()
            if self._stop.wait(self._interval):
                return

    def set_message(self, message: str) -> None:
        """Change the text shown next to the spinner."""
        with self._lock:
            self._message = message

    def finish_and_clear(self) -> None:
        """Stop ticking and erase the spinner line."""
        if self._stop.is_set():
            return
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
        if self._enabled:
            with self._lock:
                self._stream.write(_CLEAR_LINE)
                self._stream.flush()

    def __enter__(self) -> Spinner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish_and_clear()