import pytest

from seqlab.sequences import (
    complement,
    find_clumps,
    find_frequent_words,
    frequency_table,
    minimum_skew,
    pattern_count,
    reverse_complement,
    skew_array,
    starting_indices,
)

TEXT = "ACGTTGCATGTCGCATGATGCATGAGAGCT"


def test_frequency_table_totals_and_counts():
    table = frequency_table(TEXT, 4)
    assert sum(table.values()) == len(TEXT) - 4 + 1
    for kmer, count in table.items():
        assert count == pattern_count(kmer, TEXT)


def test_frequency_table_k_longer_than_text():
    assert frequency_table("ACG", 5) == {}


def test_frequency_table_rejects_zero_k():
    with pytest.raises(ValueError):
        frequency_table("ACG", 0)


def test_find_frequent_words():
    words = find_frequent_words(TEXT, 4)
    assert set(words) == {"CATG", "GCAT"}
    table = frequency_table(TEXT, 4)
    assert all(table[w] == max(table.values()) for w in words)


def test_find_frequent_words_empty():
    assert find_frequent_words("AC", 3) == []


def test_starting_indices_overlapping():
    text = "GATATATGCATATACTT"
    indices = starting_indices("ATAT", text)
    assert all(text[i:i + 4] == "ATAT" for i in indices)
    assert indices == sorted(indices)
    assert pattern_count("ATAT", text) == len(indices)
    assert len(indices) == len([i for i in range(len(text)) if text.startswith("ATAT", i)])


def test_starting_indices_empty_pattern():
    with pytest.raises(ValueError):
        starting_indices("", "ACGT")


def test_find_clumps():
    assert find_clumps("AAAACGTG", 2, 4, 3) == ["AA"]
    assert find_clumps("AAAACGTG", 2, 4, 5) == []


def test_skew_array_invariants():
    genome = "CATGGGCATCGGCCATACGCC"
    skew = skew_array(genome)
    assert len(skew) == len(genome) + 1
    assert skew[0] == 0
    assert skew[-1] == genome.count("G") - genome.count("C")
    assert all(abs(b - a) <= 1 for a, b in zip(skew, skew[1:]))


def test_minimum_skew():
    genome = "TAAAGACTGCCGAGAGGCCAACACGAGTGCTAGAACGAGGGGCGTAAACGCGGGTCCGAT"
    skew = skew_array(genome)
    positions = minimum_skew(genome)
    assert positions
    assert all(skew[i] == min(skew) for i in positions)
    assert len(positions) == skew.count(min(skew))


def test_complement():
    assert complement("ACGT") == "TGCA"
    dna = "GATTACA"
    assert complement(complement(dna)) == dna


def test_reverse_complement_round_trip():
    dna = "AAAACCCGGT"
    rc = reverse_complement(dna)
    assert reverse_complement(rc) == dna
    assert rc == complement(dna)[::-1]


def test_complement_rejects_non_dna():
    with pytest.raises(ValueError):
        complement("ACXT")