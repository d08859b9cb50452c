"""Grid puzzles: rotation, zero propagation, spiral walks and Sudoku checks."""

from __future__ import annotations

from itertools import product
from typing import Iterable, Sequence

_DIGITS = frozenset("0123456789")


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
            continue
        for c in zero_cols:
            row[c] = 0


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a matrix walked clockwise from the top left."""
    result: list[int] = []
    if not matrix or not matrix[0]:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][c] for c in range(left, right + 1))
        top += 1
        result.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
            left += 1
    return result


def _has_repeat(cells: Iterable[str]) -> bool:
    seen: set[str] = set()
    for cell in cells:
        if cell not in _DIGITS:
            continue
        if cell in seen:
            return True
        seen.add(cell)
    return False


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether no digit repeats in any row, column or 3x3 box of a 9x9 board."""
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9 rows of 9 cells")
    if any(_has_repeat(row) for row in board):
        return False
    if any(_has_repeat(column) for column in zip(*board)):
        return False
    for box_row, box_col in product(range(0, 9, 3), repeat=2):
        box = (
            board[box_row + r][box_col + c]
            for r, c in product(range(3), repeat=2)
        )
        if _has_repeat(box):
            return False
    return True