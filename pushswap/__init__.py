"""Two-stack push/swap puzzle operations, a demonstration command, and string, list and printing helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "cli",
    "dll",
    "errors",
    "lines",
    "linked_list",
    "memory",
    "numbers",
    "operations",
    "parsing",
    "printing",
    "strings",
]