"""Scoped save/restore of the stdin terminal mode.

Interactive pickers switch the terminal into raw mode.  If the process
fails or exits while a picker is active the terminal can be left
unusable, so the CLI wraps all of its work in :class:`TerminalState`.
"""

from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import Any, TextIO

try:
    import termios
except ImportError:  # Windows has no termios; nothing to restore there.
    termios = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


class TerminalState:
    """Context manager restoring the terminal attributes on every exit.

    It is a no-op when the stream is not a TTY or the platform has no
    ``termios``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdin
        self._saved: list[Any] | None = None

    @property
    def saved(self) -> bool:
        return self._saved is not None

    def __enter__(self) -> TerminalState:
        self.save()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.restore()

    def save(self) -> None:
        if termios is None:
            return
        try:
            if not self._stream.isatty():
                return
            self._saved = termios.tcgetattr(self._stream.fileno())
        except (OSError, ValueError, termios.error) as exc:
            logger.debug("Terminal state not saved: %s", exc)
            self._saved = None

    def restore(self) -> None:
        if termios is None or self._saved is None:
            return
        try:
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._saved)
        except (OSError, ValueError, termios.error) as exc:
            logger.debug("Terminal state not restored: %s", exc)
