"""Greedy genome assembly from k-mers and read simulation."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Optional

from seqlab.kmers import kmer_composition


def assert_same_length(patterns: Sequence[str]) -> None:
    """Raise ``ValueError`` unless every pattern has the same length."""
    if len({len(pattern) for pattern in patterns}) > 1:
        raise ValueError("patterns do not all have the same length")


def greedy_assembler(reads: Sequence[str]) -> str:
    """Return a genome whose k-mer composition is ``reads``.

    Assumes perfect coverage, error-free single-stranded reads of equal
    length. Starting from the first read, the genome is grown at either end
    by any read that overlaps it by ``k - 1`` symbols.
    """
    if not reads:
        raise ValueError("no reads given to the assembler")
    assert_same_length(reads)

    genome = reads[0]
    k = len(genome)
    if k == 0:
        raise ValueError("reads must not be empty strings")
    remaining = list(reads[1:])

    while remaining:
        progressed = False
        kept: list[str] = []
        for kmer in remaining:
            if kmer[1:] == genome[:k - 1]:
                genome = kmer[0] + genome
                progressed = True
            elif kmer[:-1] == genome[len(genome) - k + 1:]:
                genome += kmer[-1]
                progressed = True
            else:
                kept.append(kmer)
        if not progressed:
            raise ValueError("reads cannot be joined into a single genome")
        remaining = kept

    return genome


def simulate_reads_clean(
    genome: str,
    read_length: int,
    probability: float,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Sample error-free reads: each k-mer of the genome is kept with ``probability``.

    Reads are returned in order of their position in the genome.
    """
    source = rng if rng is not None else random.Random()
    return [kmer for kmer in kmer_composition(genome, read_length) if source.random() < probability]


def shuffle_strings(patterns: Sequence[str], rng: Optional[random.Random] = None) -> list[str]:
    """Return the patterns in a random order, leaving the input untouched."""
    source = rng if rng is not None else random.Random()
    return source.sample(list(patterns), len(patterns))