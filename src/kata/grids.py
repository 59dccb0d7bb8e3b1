"""
Exercises over two-dimensional grids: matrix product and tic-tac-toe.

Grids are lists of rows. Nothing here mutates its input.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

Matrix = Sequence[Sequence[float]]

EMPTY_CELL = None


def get_matrix_product(m1: Matrix, m2: Matrix) -> List[List[float]]:
    """
    Standard matrix product m1 x m2.

    Example:
        [[1, 2, 3]] x [[4], [5], [6]] => [[32]]

    Raises:
        ValueError: if the column count of m1 differs from the row count of m2
    """
    if not m1 or not m2:
        return []
    inner = len(m2)
    if any(len(row) != inner for row in m1):
        raise ValueError(
            f"Cannot multiply: m1 has rows of length {[len(r) for r in m1]}, "
            f"m2 has {inner} rows"
        )

    columns = list(zip(*m2))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in m1
    ]


def _lines(position: Sequence[Sequence[Optional[str]]]) -> List[List[Optional[str]]]:
    """All rows, columns and both diagonals of a square board."""
    size = len(position)
    rows = [list(row) for row in position]
    columns = [[position[r][c] for r in range(size)] for c in range(size)]
    diagonals = [
        [position[i][i] for i in range(size)],
        [position[i][size - 1 - i] for i in range(size)],
    ]
    return rows + columns + diagonals


def evaluate_tic_tac_toe_position(position: Sequence[Sequence[Optional[str]]]) -> Optional[str]:
    """
    Winner of a tic-tac-toe position: 'X', '0' or None.

    Empty cells are None. A line of empty cells is not a win.

    Example:
        [['X', None, '0'],
         [None, 'X', '0'],   => 'X'
         [None, None, 'X']]
    """
    for line in _lines(position):
        first = line[0]
        if first is not EMPTY_CELL and all(cell == first for cell in line):
            return first
    return None
