"""Textual host adapter; the demo app lives in :mod:`.app`."""

from .controller import TextualUIHooks, TextualVimAdapter, unit_for_key

__all__ = ["TextualUIHooks", "TextualVimAdapter", "unit_for_key"]
