"""Actions dedicated to Visual mode selections."""

from __future__ import annotations

from vi_core.buffer import Characters, Position
from vi_core.modes.base_mode import ModeContext
from vi_core.selection import SelectionState

from . import core


def delete_selection(
    context: ModeContext,
    start: Position,
    end: Position,
    *,
    label: str = "visual_delete",
) -> Characters:
    """Remove the inclusive range and park the cursor at its start.

    The removed text lands in the small-delete register (and so in the
    unnamed register) for a later put.
    """

    state = context.state
    state.save_undo_state(label)
    removed = Characters(state.buffer.substring(start, end))
    state.buffer.delete_range(start, end)
    state.cursor.move_to(start)
    state.mark_dirty()
    register = core.store_register(state, None, removed, default="-")
    context.bus.emit(
        "visual.delete",
        {"label": label, "register": register, "range": (start, end)},
    )
    return removed


def yank_selection(context: ModeContext, start: Position, end: Position) -> Characters:
    """Copy the inclusive range as characters; line-wise ranges arrive widened."""

    content = Characters(context.state.buffer.substring(start, end))
    register = core.store_register(context.state, None, content, default="0")
    context.bus.emit(
        "visual.yank", {"register": register, "content": content, "range": (start, end)}
    )
    return content


def swap_anchor(context: ModeContext, selection: SelectionState) -> None:
    cursor = context.state.cursor
    anchor = selection.start
    selection.start = cursor.position
    cursor.move_to(anchor)
    publish_selection(context, selection)


def publish_selection(context: ModeContext, selection: SelectionState) -> None:
    context.bus.emit(
        "visual.selection",
        {"anchor": selection.start, "cursor": context.state.cursor.position},
    )


__all__ = [
    "delete_selection",
    "publish_selection",
    "swap_anchor",
    "yank_selection",
]
