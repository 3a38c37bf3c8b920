"""Signal-safe terminal restoration."""

from .sequences import DISABLE_MOUSE, LEAVE_ALT_SCREEN, SHOW_CURSOR
from .signals import (
    capture_terminal_attributes,
    install_signal_handlers,
    restore_terminal,
    saved_attributes,
)

__all__ = [
    "DISABLE_MOUSE",
    "LEAVE_ALT_SCREEN",
    "SHOW_CURSOR",
    "capture_terminal_attributes",
    "install_signal_handlers",
    "restore_terminal",
    "saved_attributes",
]
