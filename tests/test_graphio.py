import pytest

from seqlab.graphio import (
    collect_reads_from_fasta,
    graph_to_dot,
    graph_to_fastg,
    read_genome_from_fasta,
    read_strings_from_fasta,
    valid_dna_string,
    write_contigs,
    write_contigs_fasta,
    write_genome,
    write_genome_fasta,
)

READ_A = "ACGTACGTACGTACGTACGT"
READ_B = "GGGGCCCCAAAATTTTGGGG"


def test_graph_to_dot_format(tmp_path):
    path = tmp_path / "g.dot"
    graph_to_dot(path, {"AB": ["BC"], "BC": []})
    assert path.read_text() == "digraph g {\nAB  ->  BC\n}\n"


def test_graph_to_dot_edge_count(tmp_path):
    path = tmp_path / "g.dot"
    graph = {"A": ["B", "C"], "B": ["C"], "C": []}
    graph_to_dot(path, graph)
    lines = path.read_text().splitlines()
    assert lines[0] == "digraph g {"
    assert lines[-1] == "}"
    assert len(lines) == 2 + 3


def test_graph_to_fastg_format(tmp_path):
    path = tmp_path / "g.fastg"
    graph_to_fastg(path, {"ACG": ["CGT"], "CGT": []})
    assert path.read_text() == (
        ">NODE_0_length_3_cov_1:NODE_1_length_3_cov_1;\nACG\n"
        ">NODE_1_length_3_cov_1;\nCGT\n"
    )


def test_read_strings_from_fasta(tmp_path):
    path = tmp_path / "reads.fa"
    path.write_text(">r1\nACG\nTTA\n>r2\nGGG\n\nCC\n")
    assert read_strings_from_fasta(path) == ["ACGTTA", "GGG", "CC"]


def test_read_genome_from_fasta(tmp_path):
    path = tmp_path / "genome.fa"
    path.write_text(">g\nACG\r\nTTA\n")
    assert read_genome_from_fasta(path) == "ACGTTA"


def test_collect_reads_dedupes_and_filters(tmp_path):
    path = tmp_path / "reads.fa"
    path.write_text(
        f">1\n{READ_A}\n>2\n{READ_A}\n>3\nACGN\n>4\n{READ_B[:10]}\n{READ_B[10:]}\n>end\n"
    )
    assert collect_reads_from_fasta(path) == [READ_A, READ_B]


def test_collect_reads_needs_closing_header(tmp_path):
    path = tmp_path / "reads.fa"
    path.write_text(f">1\n{READ_A}\n>2\n{READ_B}\n")
    assert collect_reads_from_fasta(path) == [READ_A]


@pytest.mark.parametrize(
    "dna, expected",
    [
        (READ_A, True),
        (READ_A[:19], False),
        ("ACGTN" * 4, False),
        ("acgt" * 5, False),
    ],
)
def test_valid_dna_string(dna, expected):
    assert valid_dna_string(dna) is expected


def test_write_genome(tmp_path):
    path = tmp_path / "genome.txt"
    write_genome("ACGT", path)
    assert path.read_text() == "ACGT\n"


def test_write_genome_fasta_round_trip(tmp_path):
    path = tmp_path / "genome.fa"
    write_genome_fasta("ACGTTGCA", path)
    assert path.read_text().splitlines()[0] == ">genome"
    assert read_genome_from_fasta(path) == "ACGTTGCA"


def test_write_contigs(tmp_path):
    path = tmp_path / "contigs.txt"
    write_contigs(["AC", "GT"], path)
    assert path.read_text().splitlines() == ["AC", "GT"]


def test_write_contigs_fasta_round_trip(tmp_path):
    path = tmp_path / "contigs.fa"
    contigs = ["ACGT", "TTGA", "C"]
    write_contigs_fasta(contigs, path)
    assert read_strings_from_fasta(path) == contigs
    assert path.read_text().splitlines()[0] == ">contig0"