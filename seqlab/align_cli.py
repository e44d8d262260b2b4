"""Command line: align sequences from FASTA files or show a Manhattan tourist path."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from typing import Optional, Union

from seqlab.alignment import Alignment, LocalAlignment, global_alignment, local_alignment
from seqlab.fasta import read_fasta_sequence, write_alignment_fasta, write_local_alignment_fasta
from seqlab.manhattan import Coordinate, Edge, manhattan_tourist, render_path

PathLike = Union[str, "os.PathLike[str]"]

_DEMO_ROWS, _DEMO_COLS = 10, 8
_DEMO_EDGES = (
    ((1, 1), (1, 2), 1),
    ((1, 3), (1, 4), 1),
    ((2, 3), (2, 4), 1),
    ((2, 2), (3, 2), 1),
    ((3, 5), (3, 6), 1),
    ((4, 2), (5, 2), 1),
    ((4, 3), (4, 4), 1),
    ((4, 5), (4, 6), 1),
    ((5, 2), (5, 3), 1),
    ((6, 0), (6, 1), 1),
    ((8, 0), (8, 1), 2),
    ((9, 2), (9, 3), 1),
    ((9, 4), (9, 5), 1),
    ((9, 6), (9, 7), 1),
)


def run_global(
    file1: PathLike, file2: PathLike, output: PathLike, match: float, mismatch: float, gap: float
) -> Alignment:
    """Globally align the sequences of two FASTA files and write the result."""
    alignment = global_alignment(read_fasta_sequence(file1), read_fasta_sequence(file2), match, mismatch, gap)
    write_alignment_fasta(alignment, output)
    return alignment


def run_local(
    file1: PathLike, file2: PathLike, output: PathLike, match: float, mismatch: float, gap: float
) -> LocalAlignment:
    """Locally align the sequences of two FASTA files and write the result with its spans."""
    result = local_alignment(read_fasta_sequence(file1), read_fasta_sequence(file2), match, mismatch, gap)
    write_local_alignment_fasta(result.alignment, output, result.start1, result.end1, result.start2, result.end2)
    return result


def demo_manhattan() -> str:
    """Return the drawn best path through the built-in 10-by-8 example grid."""
    edges = [Edge(Coordinate(*source), Coordinate(*target), weight) for source, target, weight in _DEMO_EDGES]
    path = manhattan_tourist(_DEMO_ROWS, _DEMO_COLS, edges)
    return render_path(_DEMO_ROWS, _DEMO_COLS, path)


def _add_alignment_command(subparsers, name: str, help_text: str, gap: float) -> None:
    parser = subparsers.add_parser(name, help=help_text)
    parser.add_argument("file1")
    parser.add_argument("file2")
    parser.add_argument("output")
    parser.add_argument("--match", type=float, default=1.0)
    parser.add_argument("--mismatch", type=float, default=1.0)
    parser.add_argument("--gap", type=float, default=gap)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sequence alignment tools.")
    subparsers = parser.add_subparsers(dest="command")
    _add_alignment_command(subparsers, "global", "global alignment of two FASTA files", 3.0)
    _add_alignment_command(subparsers, "local", "local alignment of two FASTA files", 1.0)
    subparsers.add_parser("manhattan", help="show the example Manhattan tourist path")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen command; with none, show the Manhattan tourist example."""
    args = _parser().parse_args(argv)
    if args.command == "global":
        run_global(args.file1, args.file2, args.output, args.match, args.mismatch, args.gap)
        print("Alignment written to", args.output)
    elif args.command == "local":
        run_local(args.file1, args.file2, args.output, args.match, args.mismatch, args.gap)
        print("Alignment written to", args.output)
    else:
        print(demo_manhattan())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())