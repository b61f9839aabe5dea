"""Readable implementations of classic algorithms, puzzles and data structures."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "basics",
    "linked_list",
    "logic",
    "patterns",
    "recursion",
    "searching",
    "sorting",
    "strings",
    "trees",
]