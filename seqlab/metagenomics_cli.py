"""Command line: compute diversity tables for a directory of samples."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

from seqlab.diversity import DistanceMetric, beta_diversity_matrix, richness_map, simpsons_map
from seqlab.samples import (
    read_samples_from_directory,
    write_beta_diversity_matrix,
    write_richness_csv,
    write_simpsons_csv,
)

PathLike = Union[str, "os.PathLike[str]"]


def run(sample_dir: PathLike, output_dir: PathLike, year: str = "2019") -> dict[str, Path]:
    """Read samples and write richness, Simpson's and beta diversity tables.

    Returns the path written for each table.
    """
    samples = read_samples_from_directory(sample_dir)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    paths = {
        "richness": out / f"RichnessMap_{year}.csv",
        "simpsons": out / f"SimpsonsMap_{year}.csv",
        "jaccard": out / f"JaccardBetaDiversityMatrix_{year}.csv",
        "bray_curtis": out / f"BrayCurtisBetaDiversityMatrix_{year}.csv",
    }
    write_richness_csv(richness_map(samples), paths["richness"])
    write_simpsons_csv(simpsons_map(samples), paths["simpsons"])
    for key, metric in (("jaccard", DistanceMetric.JACCARD), ("bray_curtis", DistanceMetric.BRAY_CURTIS)):
        names, matrix = beta_diversity_matrix(samples, metric)
        write_beta_diversity_matrix(matrix, names, paths[key])
    return paths


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute alpha and beta diversity of samples.")
    parser.add_argument("sample_dir", nargs="?", default="Data/2019_Samples")
    parser.add_argument("output_dir", nargs="?", default="Matrices")
    parser.add_argument("--year", default="2019")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compute the diversity tables and report where they were written."""
    args = _parser().parse_args(argv)
    print("Reading in samples from", args.sample_dir)
    paths = run(args.sample_dir, args.output_dir, args.year)
    for path in paths.values():
        print("Wrote", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())