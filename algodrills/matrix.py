"""Two-dimensional matrix problems."""

from __future__ import annotations

from typing import Sequence

Matrix = Sequence[Sequence[int]]

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements read clockwise in a spiral from the top-left corner."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    visited = [[False] * cols for _ in range(rows)]
    order: list[int] = []
    row = col = direction = 0
    for _ in range(rows * cols):
        order.append(matrix[row][col])
        visited[row][col] = True
        d_row, d_col = _DIRECTIONS[direction]
        nxt_row, nxt_col = row + d_row, col + d_col
        if not (0 <= nxt_row < rows and 0 <= nxt_col < cols) or visited[nxt_row][nxt_col]:
            direction = (direction + 1) % 4
        d_row, d_col = _DIRECTIONS[direction]
        row, col = row + d_row, col + d_col
    return order


def rotate_clockwise(matrix: Matrix) -> list[list[int]]:
    """Return a square matrix turned 90 degrees clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate_clockwise() needs a square matrix")
    return [list(row) for row in zip(*reversed(matrix))]


def set_zeroes(matrix: Matrix) -> list[list[int]]:
    """Return a copy with every row and column that held a zero set to zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]