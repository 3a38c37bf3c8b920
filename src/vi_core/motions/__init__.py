"""Motion targets and text object ranges computed from buffer and cursor."""

from .engine import MotionEngine, char_class
from .text_objects import OBJECT_KEYS, TextObjectEngine, TextRange

__all__ = [
    "MotionEngine",
    "OBJECT_KEYS",
    "TextObjectEngine",
    "TextRange",
    "char_class",
]
