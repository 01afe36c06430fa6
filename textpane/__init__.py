"""Editing core for a multi-line text area: key input types, undo history, line highlighting, cursor motion and scrolling."""

__version__ = "0.7.0"

__all__ = ["keys", "history", "highlight", "cursor", "scroll"]