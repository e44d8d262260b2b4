"""k-mer composition, minimizers and minimizer indexes of reads."""

from __future__ import annotations

from collections.abc import Iterable


def kmer_composition(genome: str, k: int) -> list[str]:
    """Return every length-``k`` substring of ``genome`` in order of position."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if k > len(genome) + 1:
        raise ValueError(f"k={k} is longer than the text of length {len(genome)} allows")
    return [genome[i:i + k] for i in range(len(genome) - k + 1)]


def minimizer(text: str, k: int) -> str:
    """Return the lexicographically smallest k-mer of ``text``."""
    kmers = kmer_composition(text, k)
    if not kmers:
        raise ValueError(f"text of length {len(text)} has no {k}-mers")
    return min(kmers)


def map_to_minimizer(reads: Iterable[str], k: int, window_length: int) -> dict[str, list[int]]:
    """Map each window minimizer to the indices of the reads that contain it.

    Every window of ``window_length`` symbols in each read contributes the
    minimizer of its k-mers. Index lists are in increasing order, without repeats.
    """
    index: dict[str, list[int]] = {}
    for i, read in enumerate(reads):
        for j in range(len(read) - window_length + 1):
            key = minimizer(read[j:j + window_length], k)
            positions = index.setdefault(key, [])
            if not positions or positions[-1] != i:
                positions.append(i)
    return index