"""Modal editing core: buffer, cursor, modes, registers and selection overlay."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "editor",
    "modes",
    "motions",
    "runtime",
    "selection",
    "terminal",
]

__version__ = "0.1.0"
