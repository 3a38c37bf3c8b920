"""Selection ranges, membership and highlight compositing."""

from .highlight import (
    RESET,
    SELECTION_COLOR,
    apply_selection_highlighting,
    is_selected,
    strip_ansi,
)
from .ranges import SelectionState, selection_range

__all__ = [
    "RESET",
    "SELECTION_COLOR",
    "SelectionState",
    "apply_selection_highlighting",
    "is_selected",
    "selection_range",
    "strip_ansi",
]
