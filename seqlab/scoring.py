"""Dynamic-programming score tables for pairwise sequence alignment."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[float]]


def _zeros(rows: int, cols: int) -> Matrix:
    return [[0] * cols for _ in range(rows)]


def compute_score(str1: str, str2: str, r: int, c: int, match: float, mismatch: float) -> float:
    """Score for aligning ``str1[r-1]`` with ``str2[c-1]``: ``match`` or ``-mismatch``."""
    return match if str1[r - 1] == str2[c - 1] else -mismatch


def global_score_table(str1: str, str2: str, match: float, mismatch: float, gap: float) -> Matrix:
    """Return the global alignment score table with linear gap penalties."""
    rows, cols = len(str1) + 1, len(str2) + 1
    table = _zeros(rows, cols)
    for c in range(1, cols):
        table[0][c] = -gap * c
    for r in range(1, rows):
        table[r][0] = -gap * r

    for r, a in enumerate(str1, start=1):
        for c, b in enumerate(str2, start=1):
            up = table[r - 1][c] - gap
            left = table[r][c - 1] - gap
            diag = table[r - 1][c - 1] + (match if a == b else -mismatch)
            table[r][c] = max(up, left, diag)
    return table


def local_score_table(str1: str, str2: str, match: float, mismatch: float, gap: float) -> Matrix:
    """Return the local alignment score table; every cell is at least zero."""
    rows, cols = len(str1) + 1, len(str2) + 1
    table = _zeros(rows, cols)

    for r, a in enumerate(str1, start=1):
        for c, b in enumerate(str2, start=1):
            up = table[r - 1][c] - gap
            left = table[r][c - 1] - gap
            diag = table[r - 1][c - 1] + (match if a == b else -mismatch)
            table[r][c] = max(0, up, left, diag)
    return table


def affine_score_tables(
    str1: str,
    str2: str,
    match: int,
    mismatch: int,
    gap_open: int,
    gap_extension: int,
) -> tuple[Matrix, Matrix, Matrix]:
    """Return the (lower, middle, upper) tables for affine-gap global alignment.

    ``lower`` holds scores ending in a gap in ``str2`` (vertical moves),
    ``upper`` those ending in a gap in ``str1`` (horizontal moves) and
    ``middle`` the best score overall.
    """
    rows, cols = len(str1) + 1, len(str2) + 1
    lower = _zeros(rows, cols)
    middle = _zeros(rows, cols)
    upper = _zeros(rows, cols)

    for c in range(cols):
        middle[0][c] = -gap_open - gap_extension * (c - 1)
    for r in range(rows):
        middle[r][0] = -gap_open - gap_extension * (r - 1)
    middle[0][0] = 0

    for r in range(rows):
        for c in range(cols):
            if r == 1:
                lower[r][c] = middle[r - 1][c] - gap_open
            elif r > 1:
                lower[r][c] = max(
                    lower[r - 1][c] - gap_extension,
                    middle[r - 1][c] - gap_open,
                )

            if c == 1:
                upper[r][c] = middle[r][c - 1] - gap_open
            elif c > 1:
                upper[r][c] = max(
                    upper[r][c - 1] - gap_extension,
                    middle[r][c - 1] - gap_open,
                )

            if r >= 1 and c >= 1:
                score = compute_score(str1, str2, r, c, match, mismatch)
                middle[r][c] = max(
                    lower[r][c],
                    upper[r][c],
                    middle[r - 1][c - 1] + score,
                )

    return lower, middle, upper


def _first_cell(matrix: Sequence[Sequence[float]]) -> float:
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")
    return matrix[0][0]


def maximum_element_index(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    """Return ``(row, col)`` of the first occurrence (row-major) of the largest value."""
    best = _first_cell(matrix)
    position = (0, 0)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value > best:
                best = value
                position = (i, j)
    return position


def maximum_element(matrix: Sequence[Sequence[float]]) -> float:
    """Return the largest value in the matrix."""
    _first_cell(matrix)
    return max(max(row) for row in matrix if row)