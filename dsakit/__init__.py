"""Classic algorithms and data structures in plain Python, with a small command line."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "cli",
    "diagonal",
    "dynamic",
    "graphs",
    "linked",
    "numbers",
    "searching",
    "sorting",
    "strings",
    "trees",
]