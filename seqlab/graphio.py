"""Reading reads and genomes from FASTA files and writing graphs and contigs."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import Union

from seqlab.fasta import read_fasta_sequence

PathLike = Union[str, "os.PathLike[str]"]

_log = logging.getLogger(__name__)

_DNA_SYMBOLS = frozenset("ACGT")
_MIN_READ_LENGTH = 20
_PROGRESS_INTERVAL = 20000


def _lines(filename: PathLike) -> Iterator[str]:
    with open(filename, encoding="utf-8") as handle:
        for raw in handle:
            yield raw.rstrip("\r\n")


def graph_to_dot(filename: PathLike, adj_list: Mapping[str, Iterable[str]]) -> None:
    """Write a directed graph in DOT format, one edge per line."""
    lines = ["digraph g {"]
    for node, neighbours in adj_list.items():
        lines.extend(f"{node}  ->  {neighbour}" for neighbour in neighbours)
    lines.append("}")
    Path(filename).write_text("\n".join(lines) + "\n", encoding="utf-8")


def graph_to_fastg(filename: PathLike, adj_list: Mapping[str, Sequence[str]]) -> None:
    """Write a graph in FASTG format; nodes are numbered in the graph's key order.

    A neighbour that is not itself a key gets the number 0.
    """
    index = {node: i for i, node in enumerate(adj_list)}

    def label(node: str) -> str:
        return f"NODE_{index.get(node, 0)}_length_{len(node)}_cov_1"

    parts: list[str] = []
    for node, neighbours in adj_list.items():
        header = ">" + label(node)
        if neighbours:
            header += ":" + ",".join(label(neighbour) for neighbour in neighbours)
        parts.append(f"{header};\n{node}\n")
    Path(filename).write_text("".join(parts), encoding="utf-8")


def read_strings_from_fasta(filename: PathLike) -> list[str]:
    """Return every sequence of a multi-record FASTA file, in file order.

    A header or an empty line ends the current sequence.
    """
    patterns: list[str] = []
    current: list[str] = []
    for line in _lines(filename):
        if line and not line.startswith(">"):
            current.append(line)
        else:
            if current:
                patterns.append("".join(current))
            current = []
    if current:
        patterns.append("".join(current))
    return patterns


def read_genome_from_fasta(filename: PathLike) -> str:
    """Return all non-header lines of a FASTA file joined into one genome."""
    return read_fasta_sequence(filename)


def collect_reads_from_fasta(filename: PathLike) -> list[str]:
    """Return the distinct valid DNA reads of a FASTA file in order of first appearance.

    A read is taken when the next header closes it; empty lines are skipped.
    Reads that fail :func:`valid_dna_string` are dropped.
    """
    counts: dict[str, int] = {}
    current = ""
    processed = 0
    for line in _lines(filename):
        if not line:
            continue
        if not line.startswith(">"):
            current += line
            continue
        if current and valid_dna_string(current):
            counts[current] = counts.get(current, 0) + 1
            processed += 1
            if processed % _PROGRESS_INTERVAL == 0:
                _log.info("processed %d reads", processed)
        current = ""
    return list(counts)


def valid_dna_string(dna: str) -> bool:
    """Return whether ``dna`` has at least 20 symbols, all of them A, C, G or T."""
    return len(dna) >= _MIN_READ_LENGTH and set(dna) <= _DNA_SYMBOLS


def write_genome(genome: str, filename: PathLike) -> None:
    """Write the genome on a single line."""
    Path(filename).write_text(genome + "\n", encoding="utf-8")


def write_genome_fasta(genome: str, filename: PathLike) -> None:
    """Write the genome as a FASTA record headed ``>genome``."""
    Path(filename).write_text(f">genome\n{genome}\n", encoding="utf-8")


def write_contigs(contigs: Iterable[str], filename: PathLike) -> None:
    """Write one contig per line."""
    Path(filename).write_text("".join(f"{contig}\n" for contig in contigs), encoding="utf-8")


def write_contigs_fasta(contigs: Iterable[str], filename: PathLike) -> None:
    """Write the contigs as FASTA records headed ``>contig0``, ``>contig1`` and so on."""
    Path(filename).write_text(
        "".join(f">contig{i}\n{contig}\n" for i, contig in enumerate(contigs)),
        encoding="utf-8",
    )