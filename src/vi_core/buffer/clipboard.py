"""System clipboard bridge used by the ``*`` and ``+`` registers.

Each operation walks a platform-specific chain of external tools and stops at
the first one that exits cleanly. A missing binary, a non-zero exit, a hang
past the timeout or undecodable output moves on to the next tool; when the
chain is exhausted reads return ``None`` and writes are dropped.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from typing import Callable, Optional, Sequence

from vi_core.runtime import telemetry
from vi_core.runtime.config import DEFAULT_CLIPBOARD_TIMEOUT

Command = Sequence[str]
Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]

LINUX_COPY: tuple[Command, ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
)
LINUX_PASTE: tuple[Command, ...] = (
    ("wl-paste", "--no-newline"),
    ("xclip", "-selection", "clipboard", "-o"),
)
MACOS_COPY: tuple[Command, ...] = (("pbcopy",),)
MACOS_PASTE: tuple[Command, ...] = (("pbpaste",),)


Chain = tuple[Command, ...]


def default_chains(platform: str | None = None) -> tuple[Chain, Chain]:
    """Return ``(copy_chain, paste_chain)`` for ``platform``."""

    name = platform or sys.platform
    if name == "darwin":
        return MACOS_COPY, MACOS_PASTE
    if name.startswith("linux") or "bsd" in name:
        return LINUX_COPY, LINUX_PASTE
    return (), ()


class SystemClipboard:
    def __init__(
        self,
        *,
        copy_chain: Optional[Sequence[Command]] = None,
        paste_chain: Optional[Sequence[Command]] = None,
        timeout: float = DEFAULT_CLIPBOARD_TIMEOUT,
        runner: Optional[Runner] = None,
        which: Optional[Callable[[str], Optional[str]]] = None,
        enabled: bool = True,
    ) -> None:
        default_copy, default_paste = default_chains()
        self.copy_chain = tuple(copy_chain if copy_chain is not None else default_copy)
        self.paste_chain = tuple(
            paste_chain if paste_chain is not None else default_paste
        )
        self.timeout = timeout
        self.enabled = enabled
        self._run = runner or subprocess.run
        self._which = which or shutil.which
        self.logger = telemetry.get_logger("vi_core.clipboard")

    def write(self, text: str) -> bool:
        """Send ``text`` to the first working copy tool; report success."""

        if not self.enabled:
            return False
        payload = text.encode("utf-8")
        for command in self.copy_chain:
            if self._invoke(command, stdin=payload) is not None:
                return True
        self.logger.debug("clipboard write skipped: no tool succeeded")
        return False

    def read(self) -> Optional[str]:
        if not self.enabled:
            return None
        for command in self.paste_chain:
            output = self._invoke(command)
            if output is None:
                continue
            try:
                return output.decode("utf-8")
            except UnicodeDecodeError:
                self.logger.debug(f"clipboard output from {command[0]} not utf-8")
        return None

    def _invoke(
        self, command: Command, *, stdin: bytes | None = None
    ) -> Optional[bytes]:
        # Copy tools fork a resident owner of the selection; a captured stdout
        # would be held open by it until the timeout expires.
        if self._which(command[0]) is None:
            return None
        capture = stdin is None
        try:
            proc = self._run(
                list(command),
                input=stdin if stdin is not None else b"",
                stdout=subprocess.PIPE if capture else subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            self.logger.debug(f"clipboard tool {command[0]} failed: {exc}")
            return None
        if proc.returncode != 0:
            self.logger.debug(
                f"clipboard tool {command[0]} exited with {proc.returncode}"
            )
            return None
        return (proc.stdout or b"") if capture else b""


__all__ = ["SystemClipboard", "default_chains"]
