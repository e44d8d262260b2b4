"""Edit distance, longest common subsequences and shared k-mer counts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence


def edit_distance(str1: str, str2: str) -> int:
    """Return the Levenshtein distance between two non-empty strings."""
    if not str1 or not str2:
        raise ValueError("edit distance needs two non-empty strings")

    previous = list(range(len(str2) + 1))
    for i, a in enumerate(str1, start=1):
        current = [i]
        for j, b in enumerate(str2, start=1):
            current.append(
                min(
                    current[j - 1] + 1,
                    previous[j] + 1,
                    previous[j - 1] + (0 if a == b else 1),
                )
            )
        previous = current
    return previous[-1]


def edit_distance_matrix(patterns: Sequence[str]) -> list[list[int]]:
    """Return the symmetric matrix of pairwise edit distances between patterns."""
    size = len(patterns)
    matrix = [[0] * size for _ in range(size)]
    for r, first in enumerate(patterns):
        for c, second in enumerate(patterns[:r]):
            dist = edit_distance(first, second)
            matrix[r][c] = dist
            matrix[c][r] = dist
    return matrix


def lcs_score_matrix(str1: str, str2: str) -> list[list[int]]:
    """Return the dynamic-programming table of common subsequence lengths."""
    table = [[0] * (len(str2) + 1) for _ in range(len(str1) + 1)]
    for i, a in enumerate(str1, start=1):
        for j, b in enumerate(str2, start=1):
            table[i][j] = max(
                table[i][j - 1],
                table[i - 1][j],
                table[i - 1][j - 1] + (1 if a == b else 0),
            )
    return table


def longest_common_subsequence(str1: str, str2: str) -> str:
    """Return a longest common subsequence of two strings.

    The traceback prefers moving left, then diagonally, then up.
    """
    table = lcs_score_matrix(str1, str2)
    row, col = len(str1), len(str2)
    target = table[row][col]
    symbols: list[str] = []

    while len(symbols) < target:
        here = table[row][col]
        if col > 0 and table[row][col - 1] == here:
            col -= 1
        elif row > 0 and col > 0 and table[row - 1][col - 1] + int(str1[row - 1] == str2[col - 1]) == here:
            if str1[row - 1] == str2[col - 1]:
                symbols.append(str1[row - 1])
            row -= 1
            col -= 1
        elif row > 0 and table[row - 1][col] == here:
            row -= 1
        else:
            raise ValueError(f"score table has no predecessor for cell ({row}, {col})")

    return "".join(reversed(symbols))


def lcs_length(str1: str, str2: str) -> int:
    """Return the length of a longest common subsequence of two non-empty strings."""
    if not str1 or not str2:
        raise ValueError("LCS length needs two non-empty strings")
    return lcs_score_matrix(str1, str2)[-1][-1]


def _kmer_counts(text: str, k: int) -> Counter[str]:
    return Counter(text[i:i + k] for i in range(len(text) - k + 1))


def count_shared_kmers(str1: str, str2: str, k: int) -> int:
    """Return the number of k-mers shared by two strings, counted with multiplicity."""
    return sum_of_minima(_kmer_counts(str1, k), _kmer_counts(str2, k))


def sum_of_minima(freq1: Mapping[str, int], freq2: Mapping[str, int]) -> int:
    """Sum, over the keys of ``freq1``, the smaller of the two counts (missing counts as 0)."""
    return sum(min(count, freq2.get(key, 0)) for key, count in freq1.items())