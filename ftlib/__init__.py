"""Character tests, byte buffers, string routines, linked lists, formatted output and line reading."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "transform", "lists", "output", "reader"]