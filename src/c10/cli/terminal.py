"""
Terminal session used by the clock display.

Hiding the cursor is process-wide terminal state, so it is held as a scoped
resource: entering the session hides it and leaving restores it, whichever
way the block exits.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType
from typing import TextIO

CSI = "\x1b["
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"
CLEAR_SCREEN = CSI + "2J"
CURSOR_HOME = CSI + "H"


class TerminalSession:
    """Own the cursor and screen of ``stream`` for the duration of a ``with`` block."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def __enter__(self) -> TerminalSession:
        self._stream.write(HIDE_CURSOR)
        self._stream.flush()
        self._active = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._active = False
        self._stream.write(SHOW_CURSOR + "\n")
        self._stream.flush()

    def redraw(self, line: str) -> None:
        """Clear the screen and write ``line`` at the top-left corner."""
        self._stream.write(CLEAR_SCREEN + CURSOR_HOME + line + "\n")
        self._stream.flush()


def _raise_system_exit(signum: int, _frame: object) -> None:
    raise SystemExit(128 + signum)


@contextmanager
def sigterm_as_exit() -> Iterator[None]:
    """Turn SIGTERM into ``SystemExit`` so ``with`` blocks unwind on termination."""
    previous = signal.signal(signal.SIGTERM, _raise_system_exit)
    try:
        yield
    finally:
        # None means the previous handler was not installed from Python.
        signal.signal(signal.SIGTERM, previous if previous is not None else signal.SIG_DFL)
