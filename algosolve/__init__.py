"""Solutions to classic algorithm problems on arrays, strings, numbers, lists and grids."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "linked_list",
    "numbers",
    "searching",
    "strings",
    "sudoku",
]