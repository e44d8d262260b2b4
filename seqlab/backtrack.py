"""Global alignment through explicit backtracking pointers, and graph helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from seqlab.alignment import Alignment
from seqlab.scoring import Matrix, global_score_table

_UP = "UP"
_LEFT = "LEFT"
_DIAG = "DIAG"


def _require_nonempty(str1: str, str2: str) -> None:
    if not str1 or not str2:
        raise ValueError("global alignment needs two non-empty strings")


def backtrack_score_table(str1: str, str2: str, match: float, mismatch: float, gap: float) -> Matrix:
    """Return the global alignment score table of two non-empty strings."""
    _require_nonempty(str1, str2)
    return global_score_table(str1, str2, match, mismatch, gap)


def global_backtrack(str1: str, str2: str, match: float, mismatch: float, gap: float) -> list[list[str]]:
    """Return backtracking pointers ``"UP"``, ``"LEFT"`` or ``"DIAG"`` for each cell.

    The origin cell holds an empty string. Ties prefer up, then left.
    """
    table = backtrack_score_table(str1, str2, match, mismatch, gap)
    rows, cols = len(str1) + 1, len(str2) + 1
    pointers = [[""] * cols for _ in range(rows)]
    for j in range(1, cols):
        pointers[0][j] = _LEFT
    for i in range(1, rows):
        pointers[i][0] = _UP

    for i in range(1, rows):
        for j in range(1, cols):
            here = table[i][j]
            if here == table[i - 1][j] - gap:
                pointers[i][j] = _UP
            elif here == table[i][j - 1] - gap:
                pointers[i][j] = _LEFT
            else:
                pointers[i][j] = _DIAG
    return pointers


def output_global_alignment(str1: str, str2: str, backtrack: Sequence[Sequence[str]]) -> Alignment:
    """Follow the pointers from the bottom-right corner back to the origin."""
    row, col = len(str1), len(str2)
    top: list[str] = []
    bottom: list[str] = []
    while row or col:
        pointer = backtrack[row][col]
        if pointer == _UP:
            top.append(str1[row - 1])
            bottom.append("-")
            row -= 1
        elif pointer == _LEFT:
            top.append("-")
            bottom.append(str2[col - 1])
            col -= 1
        elif pointer == _DIAG:
            top.append(str1[row - 1])
            bottom.append(str2[col - 1])
            row -= 1
            col -= 1
        else:
            raise ValueError(f"backtrack pointer not set at ({row}, {col})")
    return Alignment("".join(reversed(top)), "".join(reversed(bottom)))


def backtrack_global_alignment(str1: str, str2: str, match: float, mismatch: float, gap: float) -> Alignment:
    """Return a maximum-score global alignment built from backtracking pointers."""
    return output_global_alignment(str1, str2, global_backtrack(str1, str2, match, mismatch, gap))


def copy_graph(graph: Mapping[str, Iterable[str]]) -> dict[str, list[str]]:
    """Return a copy of an adjacency list whose neighbour lists are independent."""
    return {node: list(neighbours) for node, neighbours in graph.items()}


def graph_equal(graph1: Mapping[str, Sequence[str]], graph2: Mapping[str, Sequence[str]]) -> bool:
    """Return whether two graphs have the same nodes and, per node, the same neighbours.

    Neighbour order does not matter; multiplicity does.
    """
    if graph1.keys() != graph2.keys():
        return False
    return all(sorted(graph1[node]) == sorted(graph2[node]) for node in graph1)


def sum_length(patterns: Iterable[str]) -> int:
    """Return the total length of the patterns."""
    return sum(len(pattern) for pattern in patterns)