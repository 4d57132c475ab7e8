"""Utilities for characters, numbers, strings, byte buffers, output, line reading, linked lists and printf-style formatting."""

__version__ = "1.0.0"

__all__ = [
    "chars",
    "numbers",
    "strings",
    "memory",
    "output",
    "linereader",
    "lists",
    "formatting",
]