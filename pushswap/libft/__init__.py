"""Small helpers for characters, strings, memory buffers, lists and output."""

__all__ = ["chars", "strings", "memory", "lists", "printf", "output"]