"""Core action implementations shared across modes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from vi_core.buffer import RegisterContent
from vi_core.modes.base_mode import EditorMode, ModeResult

if TYPE_CHECKING:
    from vi_core.editor.state import EditorState


def store_register(
    state: "EditorState",
    name: Optional[str],
    content: RegisterContent,
    *,
    default: str,
) -> str:
    """Write ``content`` to the requested register, or ``default`` if none.

    An uppercase name appends to its lowercase register, as in vi; the
    lowercase name actually written is returned.
    """

    target = name or default
    state.registers.set(target, content)
    return target.lower()


def enter_insert_mode(state: "EditorState") -> ModeResult:
    state.save_undo_state("insert")
    return ModeResult(
        consumed=True, switch_to=EditorMode.INSERT, message="enter_insert"
    )


def exit_to_normal_mode(message: str = "exit") -> ModeResult:
    return ModeResult(consumed=True, switch_to=EditorMode.NORMAL, message=message)


def enter_visual_mode(variant: str) -> ModeResult:
    return ModeResult(consumed=True, switch_to=variant, message=f"enter_{variant}")


__all__ = [
    "enter_insert_mode",
    "enter_visual_mode",
    "exit_to_normal_mode",
    "store_register",
]
