"""Reading species samples from text files and writing diversity tables."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _format_value(value: float) -> str:
    text = str(value)
    if isinstance(value, float) and text.endswith(".0"):
        text = text[:-2]
    return text


def read_freq_map(filename: PathLike) -> dict[str, int]:
    """Count the lines of a file, one species name per line.

    Surrounding whitespace of the whole file is stripped first.
    """
    text = Path(filename).read_text(encoding="utf-8").strip().replace("\r\n", "\n")
    return dict(Counter(text.split("\n")))


def read_samples_from_directory(directory: PathLike) -> dict[str, dict[str, int]]:
    """Read every file of a directory as a sample named after the file, less ``.txt``."""
    return {
        entry.name.replace(".txt", "", 1): read_freq_map(entry)
        for entry in sorted(Path(directory).iterdir())
    }


def _write_map(values: Mapping[str, float], column: str, filename: PathLike) -> None:
    lines = [f"Sample,{column}"]
    lines.extend(f"{name},{_format_value(value)}" for name, value in values.items())
    Path(filename).write_text("\n".join(lines) + "\n", encoding="utf-8")


def write_richness_csv(richness: Mapping[str, int], filename: PathLike) -> None:
    """Write sample richness values as CSV with the header ``Sample,Richness``."""
    _write_map(richness, "Richness", filename)


def write_simpsons_csv(simpson: Mapping[str, float], filename: PathLike) -> None:
    """Write Simpson's index values as CSV with the header ``Sample,SimpsonsIndex``."""
    _write_map(simpson, "SimpsonsIndex", filename)


def write_beta_diversity_matrix(
    matrix: Sequence[Sequence[float]], sample_names: Sequence[str], filename: PathLike
) -> None:
    """Write a labelled distance matrix as CSV; every field is followed by a comma."""
    if len(matrix) != len(sample_names):
        raise ValueError("matrix rows and sample names differ in number")
    lines = ["," + "".join(f"{name}," for name in sample_names)]
    for name, row in zip(sample_names, matrix):
        lines.append(f"{name}," + "".join(f"{_format_value(value)}," for value in row))
    Path(filename).write_text("\n".join(lines) + "\n", encoding="utf-8")