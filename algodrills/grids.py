"""Puzzles on boards and point sets in the plane."""

import math
from collections import defaultdict
from itertools import combinations

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _ray(board, row, col, d_row, d_col):
    """Yield the squares met walking from (row, col) in one direction, excluding the start."""
    row += d_row
    col += d_col
    while 0 <= row < len(board) and 0 <= col < len(board[row]):
        yield board[row][col]
        row += d_row
        col += d_col


def num_rook_captures(board):
    """Count the pawns ('p') the rook ('R') can take in one move.

    The rook looks along its row and column; the first occupied square in each
    direction is capturable when it holds a pawn. Any other piece blocks the way.
    """
    rooks = [
        (row_index, col_index)
        for row_index, row in enumerate(board)
        for col_index, square in enumerate(row)
        if square == "R"
    ]
    if not rooks:
        raise ValueError("the board holds no rook")
    row, col = rooks[-1]
    captures = 0
    for d_row, d_col in _DIRECTIONS:
        first_piece = next(
            (square for square in _ray(board, row, col, d_row, d_col) if square != "."),
            None,
        )
        captures += first_piece == "p"
    return captures


def min_area_rect(points):
    """Return the smallest area of an axis-aligned rectangle with corners in ``points``, or 0."""
    columns = defaultdict(set)
    for x, y in points:
        columns[x].add(y)
    smallest = math.inf
    for (x1, y1), (x2, y2) in combinations(points, 2):
        if x1 != x2 and y1 != y2 and y2 in columns[x1] and y1 in columns[x2]:
            smallest = min(smallest, abs((x1 - x2) * (y1 - y2)))
    return 0 if smallest == math.inf else smallest