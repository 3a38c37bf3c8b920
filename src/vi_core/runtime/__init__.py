"""Runtime services: telelog telemetry and environment configuration."""

from .config import EditorConfig

__all__ = ["EditorConfig"]
