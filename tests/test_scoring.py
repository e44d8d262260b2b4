import pytest

from seqlab.scoring import (
    affine_score_tables,
    compute_score,
    global_score_table,
    local_score_table,
    maximum_element,
    maximum_element_index,
)


def test_compute_score_match_returns_match():
    assert compute_score("GA", "GT", 1, 1, 2.5, 4.0) == 2.5


def test_compute_score_mismatch_is_negated():
    assert compute_score("GA", "GT", 2, 2, 2.5, 4.0) == -4.0


def test_global_table_shape_and_borders():
    table = global_score_table("GATTACA", "GCATG", 1.0, 1.0, 2.0)
    assert len(table) == 8
    assert all(len(row) == 6 for row in table)
    assert table[0][0] == 0
    assert [table[0][c] for c in range(6)] == [-2.0 * c for c in range(6)]
    assert [table[r][0] for r in range(8)] == [-2.0 * r for r in range(8)]


def test_global_identical_strings_score_full_match():
    s = "ACGTAC"
    table = global_score_table(s, s, 2.0, 1.0, 3.0)
    assert table[-1][-1] == len(s) * 2.0


def test_global_table_cells_dominate_gap_moves():
    gap = 1.5
    table = global_score_table("GATTACA", "GCATGCT", 1.0, 2.0, gap)
    for r in range(1, len(table)):
        for c in range(1, len(table[0])):
            assert table[r][c] >= table[r - 1][c] - gap
            assert table[r][c] >= table[r][c - 1] - gap


def test_local_table_is_non_negative_with_zero_borders():
    table = local_score_table("GAGA", "GAT", 1.0, 1.0, 2.0)
    assert all(value >= 0 for row in table for value in row)
    assert all(value == 0 for value in table[0])
    assert all(row[0] == 0 for row in table)


def test_local_identical_strings_maximum_is_full_match():
    s = "TTAGGC"
    table = local_score_table(s, s, 1.0, 1.0, 1.0)
    assert maximum_element(table) == len(s)


def test_local_table_without_common_symbols_is_all_zero():
    table = local_score_table("AAA", "CCC", 1.0, 1.0, 1.0)
    assert maximum_element(table) == 0


def test_affine_tables_origin_and_first_row():
    _, middle, _ = affine_score_tables("GA", "GTTA", 1, 3, 2, 1)
    assert middle[0][0] == 0
    assert [middle[0][c] for c in range(1, 5)] == [-2 - 1 * (c - 1) for c in range(1, 5)]


def test_affine_middle_dominates_gap_tables():
    lower, middle, upper = affine_score_tables("CAGGT", "TAC", 1, 2, 3, 2)
    for r in range(1, len(middle)):
        for c in range(1, len(middle[0])):
            assert middle[r][c] >= lower[r][c]
            assert middle[r][c] >= upper[r][c]


def test_affine_identical_strings_score_full_match():
    s = "ACGT"
    _, middle, _ = affine_score_tables(s, s, 2, 3, 3, 2)
    assert middle[-1][-1] == len(s) * 2


def test_maximum_element_index_returns_first_occurrence():
    assert maximum_element_index([[1, 5], [5, 2]]) == (0, 1)


def test_maximum_element_returns_largest():
    assert maximum_element([[1, 5], [3, 7]]) == 7


@pytest.mark.parametrize("matrix", [[], [[]]])
def test_empty_matrix_raises(matrix):
    with pytest.raises(ValueError):
        maximum_element_index(matrix)
    with pytest.raises(ValueError):
        maximum_element(matrix)