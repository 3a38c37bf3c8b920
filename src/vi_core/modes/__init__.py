"""Mode handlers, the mode manager and the bus they share."""

from .base_mode import (
    VISUAL_MODES,
    EditorMode,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
)
from .insert_mode import InsertMode
from .mode_manager import ModeManager
from .normal_mode import NormalMode
from .visual_mode import VisualMode

__all__ = [
    "EditorMode",
    "InsertMode",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeManager",
    "ModeResult",
    "NormalMode",
    "VISUAL_MODES",
    "VisualMode",
]
