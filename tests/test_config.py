from __future__ import annotations

import pytest

from vi_core.runtime import EditorConfig, telemetry
from vi_core.runtime.config import (
    DEFAULT_CLIPBOARD_TIMEOUT,
    DEFAULT_SHIFT_WIDTH,
    DEFAULT_UNDO_DEPTH,
)


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CLIPBOARD_TIMEOUT", "NO_CLIPBOARD", "UNDO_DEPTH", "SHIFT_WIDTH"):
        monkeypatch.delenv(f"VI_CORE_{name}", raising=False)

    config = EditorConfig.from_env()

    assert config.clipboard_timeout == DEFAULT_CLIPBOARD_TIMEOUT
    assert config.clipboard_enabled is True
    assert config.undo_depth == DEFAULT_UNDO_DEPTH
    assert config.shift_width == DEFAULT_SHIFT_WIDTH


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VI_CORE_CLIPBOARD_TIMEOUT", "0.25")
    monkeypatch.setenv("VI_CORE_NO_CLIPBOARD", "yes")
    monkeypatch.setenv("VI_CORE_UNDO_DEPTH", "5")
    monkeypatch.setenv("VI_CORE_SHIFT_WIDTH", "2")

    config = EditorConfig.from_env()

    assert config.clipboard_timeout == 0.25
    assert config.clipboard_enabled is False
    assert config.undo_depth == 5
    assert config.shift_width == 2


def test_bad_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VI_CORE_CLIPBOARD_TIMEOUT", "soon")
    monkeypatch.setenv("VI_CORE_UNDO_DEPTH", "-3")
    monkeypatch.setenv("VI_CORE_SHIFT_WIDTH", "0")

    config = EditorConfig.from_env()

    assert config.clipboard_timeout == DEFAULT_CLIPBOARD_TIMEOUT
    assert config.undo_depth == DEFAULT_UNDO_DEPTH
    assert config.shift_width == DEFAULT_SHIFT_WIDTH


def test_unknown_telemetry_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="staging")


def test_env_flag_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VI_CORE_SAMPLE_FLAG", "On")
    assert telemetry.env_flag("SAMPLE_FLAG") is True

    monkeypatch.setenv("VI_CORE_SAMPLE_FLAG", "0")
    assert telemetry.env_flag("SAMPLE_FLAG") is False
    assert telemetry.env_flag("MISSING_FLAG", default=True) is True
