"""Reading sequences from FASTA files and writing pairwise alignments."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def read_fasta_sequence(filename: PathLike) -> str:
    """Return all non-header lines of a FASTA file joined into one sequence."""
    with open(filename, encoding="utf-8") as handle:
        return "".join(
            line
            for line in (raw.rstrip("\r\n") for raw in handle)
            if line and not line.startswith(">")
        )


def match_line(alignment: Sequence[str]) -> str:
    """Return the marker row: ``|`` for matches, ``.`` for mismatches, space for gaps."""
    first, second = alignment
    if len(first) != len(second):
        raise ValueError("alignment rows differ in length")

    def marker(a: str, b: str) -> str:
        if a == "-" or b == "-":
            return " "
        return "|" if a == b else "."

    return "".join(marker(a, b) for a, b in zip(first, second))


def format_alignment(alignment: Sequence[str]) -> str:
    """Return the two rows of an alignment, one per line."""
    first, second = alignment
    return f"{first}\n{second}"


def _alignment_block(alignment: Sequence[str], header1: str, header2: str) -> str:
    first, second = alignment
    return f"{header1}\n{first}\n{match_line(alignment)}\n{second}\n{header2}\n"


def write_alignment_fasta(alignment: Sequence[str], filename: PathLike) -> None:
    """Write an alignment with a marker row between its rows."""
    Path(filename).write_text(
        _alignment_block(alignment, ">string_1", ">string_2"), encoding="utf-8"
    )


def write_local_alignment_fasta(
    alignment: Sequence[str],
    filename: PathLike,
    start1: int,
    end1: int,
    start2: int,
    end2: int,
) -> None:
    """Write a local alignment whose headers give the span covered in each string."""
    Path(filename).write_text(
        _alignment_block(
            alignment,
            f">string_1: {start1} to {end1}",
            f">string_2: {start2} to {end2}",
        ),
        encoding="utf-8",
    )