"""Named registers with system clipboard integration."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Dict, Optional, Union

from vi_core.runtime import telemetry

from .clipboard import SystemClipboard

UNNAMED = '"'
CLIPBOARD_NAMES = frozenset("*+")
VALID_NAMES = frozenset(string.ascii_letters + string.digits + '"-*+/')


@dataclass(frozen=True, slots=True)
class Characters:
    """Character-wise register content."""

    text: str = ""


@dataclass(frozen=True, slots=True)
class Lines:
    """Line-wise register content."""

    lines: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


RegisterContent = Union[Characters, Lines]


def flatten(content: RegisterContent) -> str:
    """Render content as plain text, joining lines with ``\\n``."""

    if isinstance(content, Characters):
        return content.text
    if isinstance(content, Lines):
        return "\n".join(content.lines)
    raise TypeError(f"Unsupported register content {content!r}")


def merge(existing: RegisterContent, incoming: RegisterContent) -> RegisterContent:
    """Append ``incoming`` to ``existing``; mixing kinds promotes to ``Lines``."""

    if isinstance(existing, Characters):
        if isinstance(incoming, Characters):
            return Characters(existing.text + incoming.text)
        if isinstance(incoming, Lines):
            return Lines((existing.text, *incoming.lines))
    elif isinstance(existing, Lines):
        if isinstance(incoming, Lines):
            return Lines(existing.lines + incoming.lines)
        if isinstance(incoming, Characters):
            return Lines((*existing.lines, incoming.text))
    raise TypeError(f"Cannot merge {incoming!r} into {existing!r}")


def is_valid_name(name: str) -> bool:
    return len(name) == 1 and name in VALID_NAMES


class RegisterManager:
    """Process-wide register store.

    Every successful write to a local register is mirrored into the unnamed
    register ``"``, which is also what put operations read. ``*`` and ``+``
    are never stored; they proxy to the system clipboard and do not touch the
    unnamed register. An uppercase letter names its lowercase register and
    turns writes into appends. Invalid names read as ``None`` and ignore
    writes.
    """

    def __init__(self, *, clipboard: Optional[SystemClipboard] = None) -> None:
        self.clipboard = clipboard or SystemClipboard()
        self._registers: Dict[str, RegisterContent] = {UNNAMED: Characters("")}
        self.logger = telemetry.get_logger("vi_core.registers")

    @property
    def unnamed(self) -> RegisterContent:
        return self._registers[UNNAMED]

    def put_register(self) -> RegisterContent:
        return self.unnamed

    def get(self, name: str) -> Optional[RegisterContent]:
        if name in CLIPBOARD_NAMES:
            text = self.clipboard.read()
            return Characters(text) if text is not None else None
        if not is_valid_name(name):
            return None
        return self._registers.get(name.lower())

    def set(self, name: str, content: RegisterContent) -> None:
        if name in CLIPBOARD_NAMES:
            self.clipboard.write(flatten(content))
            return
        if not is_valid_name(name):
            self.logger.debug(f"ignoring write to invalid register {name!r}")
            return
        if name.isupper():
            self.append(name, content)
            return
        self._store(name, content)

    def append(self, name: str, content: RegisterContent) -> None:
        if name in CLIPBOARD_NAMES:
            current = self.clipboard.read()
            if current is None:
                self.set(name, content)
            else:
                self.clipboard.write(current + flatten(content))
            return
        if not is_valid_name(name):
            return
        name = name.lower()
        existing = self._registers.get(name)
        if existing is None:
            self._store(name, content)
            return
        self._store(name, merge(existing, content))

    def _store(self, name: str, content: RegisterContent) -> None:
        self._registers[name] = content
        self._registers[UNNAMED] = content
        telemetry.record_event(
            "register.write",
            data={"register": name, "kind": type(content).__name__},
            logger_name="vi_core.registers",
        )


_DEFAULT_REGISTERS: Optional[RegisterManager] = None


def default_registers(
    *, clipboard: Optional[SystemClipboard] = None
) -> RegisterManager:
    """Return the process-wide manager, creating it on first use.

    ``clipboard`` only applies to that first creation.
    """

    global _DEFAULT_REGISTERS
    if _DEFAULT_REGISTERS is None:
        _DEFAULT_REGISTERS = RegisterManager(clipboard=clipboard)
    return _DEFAULT_REGISTERS


__all__ = [
    "Characters",
    "Lines",
    "RegisterContent",
    "RegisterManager",
    "CLIPBOARD_NAMES",
    "UNNAMED",
    "VALID_NAMES",
    "default_registers",
    "flatten",
    "is_valid_name",
    "merge",
]
