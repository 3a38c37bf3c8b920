"""High-level editing verbs reused across modes."""

from . import core, motion, normal, text, visual
from .core import (
    enter_insert_mode,
    enter_visual_mode,
    exit_to_normal_mode,
    store_register,
)
from .motion import MOTIONS, go_to_top
from .text import change_case, shift_lines
from .visual import delete_selection, swap_anchor, yank_selection

__all__ = [
    "MOTIONS",
    "change_case",
    "core",
    "delete_selection",
    "enter_insert_mode",
    "enter_visual_mode",
    "exit_to_normal_mode",
    "go_to_top",
    "motion",
    "normal",
    "shift_lines",
    "store_register",
    "swap_anchor",
    "text",
    "visual",
    "yank_selection",
]
