"""Fixed control sequences written when the terminal is handed back."""

DISABLE_MOUSE = "\x1b[?1006l\x1b[?1003l"
LEAVE_ALT_SCREEN = "\x1b[?1049l"
SHOW_CURSOR = "\x1b[?25h"

# Order matters: mouse off, main screen, cursor visible.
RESTORE_SEQUENCES = (
    DISABLE_MOUSE.encode("ascii"),
    LEAVE_ALT_SCREEN.encode("ascii"),
    SHOW_CURSOR.encode("ascii"),
)

__all__ = [
    "DISABLE_MOUSE",
    "LEAVE_ALT_SCREEN",
    "RESTORE_SEQUENCES",
    "SHOW_CURSOR",
]
