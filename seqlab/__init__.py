"""Sequence alignment, assembly, metagenomic diversity and related utilities."""

__version__ = "0.1.0"

__all__ = [
    "align_cli",
    "alignment",
    "assembler",
    "assembly_cli",
    "automata",
    "backtrack",
    "distance",
    "diversity",
    "fasta",
    "graphio",
    "kmers",
    "life",
    "manhattan",
    "metagenomics_cli",
    "numbers",
    "overlap",
    "samples",
    "scoring",
    "sequences",
]