"""Editor settings read from ``VI_CORE_*`` environment variables."""

from __future__ import annotations

from dataclasses import dataclass

from .telemetry import env_flag, env_value

DEFAULT_CLIPBOARD_TIMEOUT = 2.0
DEFAULT_UNDO_DEPTH = 200
DEFAULT_SHIFT_WIDTH = 4


def _float(name: str, fallback: float) -> float:
    raw = env_value(name)
    if raw is None:
        return fallback
    try:
        value = float(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


def _int(name: str, fallback: int) -> int:
    raw = env_value(name)
    if raw is None:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    clipboard_timeout: float = DEFAULT_CLIPBOARD_TIMEOUT
    clipboard_enabled: bool = True
    undo_depth: int = DEFAULT_UNDO_DEPTH
    shift_width: int = DEFAULT_SHIFT_WIDTH

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            clipboard_timeout=_float("CLIPBOARD_TIMEOUT", DEFAULT_CLIPBOARD_TIMEOUT),
            clipboard_enabled=not env_flag("NO_CLIPBOARD"),
            undo_depth=_int("UNDO_DEPTH", DEFAULT_UNDO_DEPTH),
            shift_width=_int("SHIFT_WIDTH", DEFAULT_SHIFT_WIDTH),
        )


__all__ = [
    "EditorConfig",
    "DEFAULT_CLIPBOARD_TIMEOUT",
    "DEFAULT_SHIFT_WIDTH",
    "DEFAULT_UNDO_DEPTH",
]
