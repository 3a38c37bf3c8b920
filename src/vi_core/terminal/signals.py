"""Terminal restoration on interrupt/terminate.

The handler only writes the constant byte strings from :mod:`.sequences`,
restores the attributes captured once at startup and re-delivers the signal
with the default disposition. It never touches editor state, logging or
anything else the interrupted code may be halfway through mutating.
"""

from __future__ import annotations

import os
import signal
import sys
from contextlib import suppress
from typing import Any, Iterable, List, Optional

from .sequences import RESTORE_SEQUENCES

_IS_WINDOWS = os.name == "nt"

if not _IS_WINDOWS:
    import termios

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)
STDOUT_FILENO = 1

# Written once by capture_terminal_attributes, read-only afterwards.
_SAVED: Optional[List[Any]] = None
_INPUT_FD: Optional[int] = None
_OUTPUT_FD = STDOUT_FILENO


def capture_terminal_attributes(
    fd: Optional[int] = None, *, output_fd: int = STDOUT_FILENO
) -> bool:
    """Remember the terminal attributes of ``fd`` (stdin by default).

    Only the first successful call records anything; later calls return
    ``False`` and leave the saved attributes untouched. A descriptor that is
    not a terminal also returns ``False``, so restoration only writes the
    escape sequences.
    """

    global _SAVED, _INPUT_FD, _OUTPUT_FD
    if _SAVED is not None or _IS_WINDOWS:
        return False
    try:
        if fd is None:
            fd = sys.stdin.fileno()
        attributes = termios.tcgetattr(fd)
    except (OSError, ValueError, termios.error):
        return False
    _SAVED, _INPUT_FD, _OUTPUT_FD = attributes, fd, output_fd
    return True


def saved_attributes() -> Optional[List[Any]]:
    return _SAVED


def restore_terminal() -> None:
    """Hand the terminal back: the shutdown hook for orderly exits."""

    for sequence in RESTORE_SEQUENCES:
        with suppress(OSError):
            os.write(_OUTPUT_FD, sequence)
    if _SAVED is None or _INPUT_FD is None or _IS_WINDOWS:
        return
    with suppress(OSError, termios.error):
        termios.tcsetattr(_INPUT_FD, termios.TCSANOW, _SAVED)


def _handle_signal(signum: int, frame: Any) -> None:
    del frame
    restore_terminal()
    signal.signal(signum, signal.SIG_DFL)
    os.kill(os.getpid(), signum)


def install_signal_handlers(signals: Iterable[int] = DEFAULT_SIGNALS) -> None:
    """Route ``signals`` through the restore path, then the default action."""

    for signum in signals:
        signal.signal(signum, _handle_signal)


__all__ = [
    "DEFAULT_SIGNALS",
    "capture_terminal_attributes",
    "install_signal_handlers",
    "restore_terminal",
    "saved_attributes",
]
