"""Character, byte, string, number, linked-list, formatting and line-reading helpers."""

__version__ = "1.0.0"

__all__ = [
    "charclass",
    "memory",
    "numbers",
    "strings",
    "linkedlist",
    "output",
    "printf",
    "reader",
]