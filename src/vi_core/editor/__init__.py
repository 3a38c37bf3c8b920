"""Editor state and the public façade hosts drive."""

from .editor import Editor
from .state import EditorState

__all__ = ["Editor", "EditorState"]
