"""Checking and solving 9x9 Sudoku boards of single-character cells."""

from __future__ import annotations

from collections.abc import Sequence

EMPTY = "."
DIGITS = "123456789"

_UNITS = (
    [[(row, col) for col in range(9)] for row in range(9)]
    + [[(row, col) for row in range(9)] for col in range(9)]
    + [
        [(top + dr, left + dc) for dr in range(3) for dc in range(3)]
        for top in range(0, 9, 3)
        for left in range(0, 9, 3)
    ]
)


def _box(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """True when no row, column or 3x3 box repeats a filled digit."""
    for unit in _UNITS:
        filled = [board[row][col] for row, col in unit if board[row][col] != EMPTY]
        if len(filled) != len(set(filled)):
            return False
    return True


def solve_sudoku(board: list[list[str]]) -> None:
    """Fill the empty cells of board in place.

    Raises ValueError, leaving the board unchanged, when it has no solution.
    """
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empties: list[tuple[int, int]] = []
    for row, line in enumerate(board):
        for col, cell in enumerate(line):
            if cell == EMPTY:
                empties.append((row, col))
            else:
                rows[row].add(cell)
                cols[col].add(cell)
                boxes[_box(row, col)].add(cell)

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        row, col = empties[position]
        box = _box(row, col)
        for digit in DIGITS:
            if digit in rows[row] or digit in cols[col] or digit in boxes[box]:
                continue
            board[row][col] = digit
            rows[row].add(digit)
            cols[col].add(digit)
            boxes[box].add(digit)
            if fill(position + 1):
                return True
            rows[row].discard(digit)
            cols[col].discard(digit)
            boxes[box].discard(digit)
            board[row][col] = EMPTY
        return False

    if not fill(0):
        raise ValueError("the puzzle has no solution")