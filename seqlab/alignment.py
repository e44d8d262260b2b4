"""Global, local and affine-gap pairwise alignment with traceback."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from seqlab.scoring import (
    Matrix,
    affine_score_tables,
    compute_score,
    global_score_table,
    local_score_table,
    maximum_element_index,
)


class Alignment(NamedTuple):
    """Two aligned rows of equal length, with ``-`` marking gaps."""

    first: str
    second: str


class LocalAlignment(NamedTuple):
    """A local alignment together with the spans it covers in each string."""

    alignment: Alignment
    start1: int
    end1: int
    start2: int
    end2: int


class AffineAlignment(NamedTuple):
    """An affine-gap global alignment and its score."""

    score: int
    first: str
    second: str


def _trace_linear(
    str1: str,
    str2: str,
    table: Matrix,
    r: int,
    c: int,
    match: float,
    mismatch: float,
    gap: float,
    stop_at_zero: bool,
) -> tuple[str, str, int, int]:
    top: list[str] = []
    bottom: list[str] = []
    while r > 0 or c > 0:
        here = table[r][c]
        if stop_at_zero and here == 0:
            break
        if r > 0 and table[r - 1][c] - gap == here:
            top.append(str1[r - 1])
            bottom.append("-")
            r -= 1
        elif c > 0 and table[r][c - 1] - gap == here:
            top.append("-")
            bottom.append(str2[c - 1])
            c -= 1
        elif (
            r > 0
            and c > 0
            and table[r - 1][c - 1] + compute_score(str1, str2, r, c, match, mismatch) == here
        ):
            top.append(str1[r - 1])
            bottom.append(str2[c - 1])
            r -= 1
            c -= 1
        else:
            raise ValueError(f"score table has no predecessor for cell ({r}, {c})")
    return "".join(reversed(top)), "".join(reversed(bottom)), r, c


def global_alignment(str1: str, str2: str, match: float, mismatch: float, gap: float) -> Alignment:
    """Return a maximum-score global alignment of two strings."""
    table = global_score_table(str1, str2, match, mismatch, gap)
    first, second, _, _ = _trace_linear(
        str1, str2, table, len(str1), len(str2), match, mismatch, gap, stop_at_zero=False
    )
    return Alignment(first, second)


def local_alignment(str1: str, str2: str, match: float, mismatch: float, gap: float) -> LocalAlignment:
    """Return a maximum-score local alignment and the spans it covers.

    The span of ``str1`` is ``str1[start1:end1]``, likewise for ``str2``.
    """
    table = local_score_table(str1, str2, match, mismatch, gap)
    end1, end2 = maximum_element_index(table)
    first, second, start1, start2 = _trace_linear(
        str1, str2, table, end1, end2, match, mismatch, gap, stop_at_zero=True
    )
    return LocalAlignment(Alignment(first, second), start1, end1, start2, end2)


class _Move(Enum):
    UP = "up"
    LEFT = "left"
    DIAG = "diag"


# For a tie between two moves, the move to take when the previous one is
# unknown or is the one excluded from the tie.
_TIE_DEFAULT = {_Move.DIAG: _Move.UP, _Move.LEFT: _Move.DIAG, _Move.UP: _Move.LEFT}


def _choose_move(up: bool, left: bool, diag: bool, last: Optional[_Move]) -> _Move:
    candidates = [move for move, ok in ((_Move.UP, up), (_Move.LEFT, left), (_Move.DIAG, diag)) if ok]
    if len(candidates) == 1:
        return candidates[0]
    if len(candidates) == 3:
        return last if last is not None else _Move.DIAG
    if len(candidates) == 2:
        (excluded,) = set(_Move) - set(candidates)
        if last is not None and last is not excluded:
            return last
        return _TIE_DEFAULT[excluded]
    raise ValueError("bad scoring matrix: no move available during traceback")


def affine_alignment(
    match: int,
    mismatch: int,
    gap_open: int,
    gap_extension: int,
    str1: str,
    str2: str,
) -> AffineAlignment:
    """Return a global alignment with affine gap penalties and its score.

    Ties between moves keep the direction of the previous move where possible.
    """
    lower, middle, upper = affine_score_tables(str1, str2, match, mismatch, gap_open, gap_extension)
    r, c = len(str1), len(str2)
    top: list[str] = []
    bottom: list[str] = []
    last: Optional[_Move] = None

    while r > 0 or c > 0:
        go_up = (r > 0 and lower[r][c] == middle[r][c]) or (r > 0 and c == 0)
        go_left = (c > 0 and upper[r][c] == middle[r][c]) or (r == 0 and c > 0)
        go_diag = (
            r > 0
            and c > 0
            and middle[r][c] == middle[r - 1][c - 1] + compute_score(str1, str2, r, c, match, mismatch)
        )
        last = _choose_move(go_up, go_left, go_diag, last)

        if last is _Move.UP:
            top.append(str1[r - 1])
            bottom.append("-")
            r -= 1
        elif last is _Move.DIAG:
            top.append(str1[r - 1])
            bottom.append(str2[c - 1])
            r -= 1
            c -= 1
        else:
            top.append("-")
            bottom.append(str2[c - 1])
            c -= 1

    return AffineAlignment(
        middle[len(str1)][len(str2)],
        "".join(reversed(top)),
        "".join(reversed(bottom)),
    )