"""Command line: simulate reads from a genome and summarise their overlap network."""

from __future__ import annotations

import argparse
import os
import random
from collections.abc import Sequence
from typing import Optional, Union

from seqlab.assembler import simulate_reads_clean
from seqlab.graphio import read_genome_from_fasta
from seqlab.overlap import average_out_degree, make_overlap_network

PathLike = Union[str, "os.PathLike[str]"]


def overlap_network_summary(
    genome_file: PathLike,
    read_length: int,
    probability: float,
    match: float,
    mismatch: float,
    gap: float,
    threshold: float,
    rng: Optional[random.Random] = None,
) -> tuple[list[str], dict[str, list[str]]]:
    """Simulate clean reads from a FASTA genome and build their overlap network.

    Returns the simulated reads and the network's adjacency list.
    """
    genome = read_genome_from_fasta(genome_file)
    reads = simulate_reads_clean(genome, read_length, probability, rng)
    network = make_overlap_network(reads, match, mismatch, gap, threshold)
    return reads, network


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate reads from a genome and build their overlap network."
    )
    parser.add_argument("genome", nargs="?", default="Data/SARS-CoV_genome.fasta")
    parser.add_argument("--read-length", type=int, default=150)
    parser.add_argument("--probability", type=float, default=0.1)
    parser.add_argument("--match", type=float, default=1.0)
    parser.add_argument("--mismatch", type=float, default=5.0)
    parser.add_argument("--gap", type=float, default=1.0)
    parser.add_argument("--threshold", type=float, default=40.0)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the overlap network summary and print its statistics."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    reads, network = overlap_network_summary(
        args.genome,
        args.read_length,
        args.probability,
        args.match,
        args.mismatch,
        args.gap,
        args.threshold,
        rng,
    )
    print("Reads simulated! We have", len(reads), "total reads.")
    print("Overlap network generated!")
    print("The graph has", len(network), "reads")
    print("Average outdegree:", average_out_degree(network))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())