"""Pieces of a screen editor: text buffers and marks, word motion, pushback input, terminal output, the message line, windows and pages."""

__version__ = "0.1.0"

__all__ = [
    "messages",
    "page",
    "pushback",
    "terminal",
    "text",
    "window",
    "words",
]