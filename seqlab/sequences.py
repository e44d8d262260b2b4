"""Basic DNA string analysis: k-mer frequencies, pattern search, skew, complements."""

from __future__ import annotations

from collections import Counter

_COMPLEMENT = {"A": "T", "C": "G", "G": "C", "T": "A"}


def frequency_table(text: str, k: int) -> dict[str, int]:
    """Return how often each k-mer occurs in ``text``, in order of first occurrence."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    return dict(Counter(text[i:i + k] for i in range(len(text) - k + 1)))


def find_frequent_words(text: str, k: int) -> list[str]:
    """Return the most frequent k-mers of ``text`` in order of first occurrence."""
    table = frequency_table(text, k)
    if not table:
        return []
    best = max(table.values())
    return [kmer for kmer, count in table.items() if count == best]


def starting_indices(pattern: str, text: str) -> list[int]:
    """Return every position at which ``pattern`` occurs in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    return [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]


def pattern_count(pattern: str, text: str) -> int:
    """Return the number of (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    return len(starting_indices(pattern, text))


def find_clumps(text: str, k: int, window: int, t: int) -> list[str]:
    """Return the k-mers occurring at least ``t`` times in some window of ``window`` symbols.

    They are listed in the order they are found.
    """
    found: dict[str, None] = {}
    for i in range(len(text) - window + 1):
        for kmer, count in frequency_table(text[i:i + window], k).items():
            if count >= t:
                found.setdefault(kmer)
    return list(found)


def skew_array(genome: str) -> list[int]:
    """Return the running G minus C count, starting with 0 before the first symbol."""
    skew = [0]
    for symbol in genome:
        skew.append(skew[-1] + (symbol == "G") - (symbol == "C"))
    return skew


def minimum_skew(genome: str) -> list[int]:
    """Return every position at which the skew reaches its minimum."""
    skew = skew_array(genome)
    lowest = min(skew)
    return [i for i, value in enumerate(skew) if value == lowest]


def complement(dna: str) -> str:
    """Return the base-by-base complement of a DNA string."""
    try:
        return "".join(_COMPLEMENT[base] for base in dna)
    except KeyError as error:
        raise ValueError(f"not a DNA base: {error.args[0]!r}") from None


def reverse_complement(dna: str) -> str:
    """Return the reverse complement of a DNA string."""
    return complement(dna)[::-1]