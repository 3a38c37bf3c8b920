from __future__ import annotations

import signal
from typing import Any, List, Tuple

import pytest

from vi_core.terminal import signals
from vi_core.terminal.sequences import DISABLE_MOUSE, LEAVE_ALT_SCREEN, SHOW_CURSOR

pytestmark = pytest.mark.skipif(
    signals._IS_WINDOWS, reason="termios is not available on Windows"
)


@pytest.fixture
def calls(monkeypatch: pytest.MonkeyPatch) -> List[Tuple[str, Any]]:
    recorded: List[Tuple[str, Any]] = []
    monkeypatch.setattr(signals, "_SAVED", None)
    monkeypatch.setattr(signals, "_INPUT_FD", None)
    monkeypatch.setattr(signals, "_OUTPUT_FD", signals.STDOUT_FILENO)
    monkeypatch.setattr(
        signals.termios, "tcgetattr", lambda fd: ["attrs", fd]
    )
    monkeypatch.setattr(
        signals.termios,
        "tcsetattr",
        lambda fd, when, attrs: recorded.append(("tcsetattr", (fd, attrs))),
    )
    monkeypatch.setattr(
        signals.os, "write", lambda fd, data: recorded.append(("write", data))
    )
    monkeypatch.setattr(
        signals.os, "kill", lambda pid, signum: recorded.append(("kill", signum))
    )
    monkeypatch.setattr(
        signals.signal,
        "signal",
        lambda signum, handler: recorded.append(("signal", (signum, handler))),
    )
    return recorded


def test_capture_is_write_once(calls: List[Tuple[str, Any]]) -> None:
    assert signals.capture_terminal_attributes(5) is True
    assert signals.capture_terminal_attributes(7) is False

    assert signals.saved_attributes() == ["attrs", 5]


def test_handler_restores_in_order_then_redelivers(
    calls: List[Tuple[str, Any]],
) -> None:
    signals.capture_terminal_attributes(3)

    signals._handle_signal(signal.SIGTERM, None)

    assert calls == [
        ("write", DISABLE_MOUSE.encode()),
        ("write", LEAVE_ALT_SCREEN.encode()),
        ("write", SHOW_CURSOR.encode()),
        ("tcsetattr", (3, ["attrs", 3])),
        ("signal", (signal.SIGTERM, signal.SIG_DFL)),
        ("kill", signal.SIGTERM),
    ]


def test_restore_without_capture_only_writes(calls: List[Tuple[str, Any]]) -> None:
    signals.restore_terminal()

    assert [name for name, _ in calls] == ["write", "write", "write"]


def test_failed_attribute_restore_is_ignored(
    calls: List[Tuple[str, Any]], monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken(fd: int, when: int, attrs: Any) -> None:
        raise signals.termios.error("not a tty")

    signals.capture_terminal_attributes(3)
    monkeypatch.setattr(signals.termios, "tcsetattr", broken)

    signals.restore_terminal()

    assert len(calls) == 3


def test_install_registers_default_signals(calls: List[Tuple[str, Any]]) -> None:
    signals.install_signal_handlers()

    assert calls == [
        ("signal", (signal.SIGINT, signals._handle_signal)),
        ("signal", (signal.SIGTERM, signals._handle_signal)),
    ]


def test_capture_on_non_terminal_reports_failure(
    calls: List[Tuple[str, Any]], monkeypatch: pytest.MonkeyPatch
) -> None:
    def not_a_tty(fd: int) -> Any:
        raise signals.termios.error(25, "Inappropriate ioctl for device")

    monkeypatch.setattr(signals.termios, "tcgetattr", not_a_tty)

    assert signals.capture_terminal_attributes(0) is False
    assert signals.saved_attributes() is None

    signals.restore_terminal()
    assert [name for name, _ in calls] == ["write", "write", "write"]
