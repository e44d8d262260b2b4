"""Overlap alignment between reads and overlap networks built from it."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def score_overlap_alignment(str1: str, str2: str, match: float, mismatch: float, gap: float) -> float:
    """Return the best score for overlapping a suffix of ``str1`` with a prefix of ``str2``.

    All penalties are given as positive numbers. The result is never below zero.
    """
    if not str1 or not str2:
        raise ValueError("overlap alignment needs two non-empty strings")

    previous = [-gap * c for c in range(len(str2) + 1)]
    previous[0] = 0.0
    for a in str1:
        current = [0.0]
        for c, b in enumerate(str2, start=1):
            up = previous[c] - gap
            left = current[c - 1] - gap
            diag = previous[c - 1] + (match if a == b else -mismatch)
            current.append(max(up, left, diag))
        previous = current
    return max(0.0, *previous)


def overlap_scoring_matrix(
    reads: Sequence[str], match: float, mismatch: float, gap: float
) -> list[list[float]]:
    """Return the matrix whose ``[i][j]`` entry scores ``reads[i]`` overlapping ``reads[j]``.

    Entries on the diagonal are zero.
    """
    return [
        [
            0.0 if i == j else score_overlap_alignment(first, second, match, mismatch, gap)
            for j, second in enumerate(reads)
        ]
        for i, first in enumerate(reads)
    ]


def binarize_matrix(matrix: Sequence[Sequence[float]], threshold: float) -> list[list[int]]:
    """Turn a square score matrix into 0/1 entries using ``threshold``.

    An entry becomes 1 when it reaches the threshold and beats its mirror
    across the diagonal; of two equal mirrored entries only the one above
    the diagonal is kept.
    """
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")

    def keep(i: int, j: int) -> bool:
        value, mirror = matrix[i][j], matrix[j][i]
        if value < threshold:
            return False
        return value > mirror or (value == mirror and i < j)

    return [[int(keep(i, j)) for j in range(size)] for i in range(size)]


def make_overlap_network(
    reads: Sequence[str], match: float, mismatch: float, gap: float, threshold: float
) -> dict[str, list[str]]:
    """Return the overlap graph of the reads as an adjacency list.

    Every read is a key, even without neighbours. An edge joins two reads
    whose overlap score reaches ``threshold`` (see :func:`binarize_matrix`).
    """
    if not reads:
        raise ValueError("no reads given")
    binary = binarize_matrix(overlap_scoring_matrix(reads, match, mismatch, gap), threshold)
    adjacency: dict[str, list[str]] = {}
    for read, row in zip(reads, binary):
        adjacency[read] = [other for other, flag in zip(reads, row) if flag]
    return adjacency


def average_out_degree(adj_list: Mapping[str, Sequence[str]]) -> float:
    """Return the mean number of outgoing edges over the nodes of the graph."""
    if not adj_list:
        raise ValueError("graph has no nodes")
    return sum(len(neighbours) for neighbours in adj_list.values()) / len(adj_list)