# seqlab

A small computational-biology toolkit in plain Python, with no third-party
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `seqlab.scoring` | Score tables: `global_score_table`, `local_score_table`, `affine_score_tables`, `compute_score`, `maximum_element`, `maximum_element_index` |
| `seqlab.alignment` | `global_alignment`, `local_alignment`, `affine_alignment` and their results `Alignment`, `LocalAlignment`, `AffineAlignment` |
| `seqlab.backtrack` | Global alignment through explicit pointers (`global_backtrack`, `output_global_alignment`, `backtrack_global_alignment`), plus `copy_graph`, `graph_equal`, `sum_length` |
| `seqlab.distance` | `edit_distance`, `edit_distance_matrix`, `lcs_score_matrix`, `longest_common_subsequence`, `lcs_length`, `count_shared_kmers`, `sum_of_minima` |
| `seqlab.kmers` | `kmer_composition`, `minimizer`, `map_to_minimizer` |
| `seqlab.manhattan` | The Manhattan tourist problem: `Coordinate`, `Edge`, `build_edge_map`, `find_edge`, `manhattan_tourist_score`, `manhattan_tourist`, `render_path` |
| `seqlab.fasta` | `read_fasta_sequence`, `match_line`, `format_alignment`, `write_alignment_fasta`, `write_local_alignment_fasta` |
| `seqlab.overlap` | `score_overlap_alignment`, `overlap_scoring_matrix`, `binarize_matrix`, `make_overlap_network`, `average_out_degree` |
| `seqlab.assembler` | `greedy_assembler`, `assert_same_length`, `simulate_reads_clean`, `shuffle_strings` |
| `seqlab.graphio` | FASTA readers (`read_strings_from_fasta`, `read_genome_from_fasta`, `collect_reads_from_fasta`, `valid_dna_string`) and writers (`graph_to_dot`, `graph_to_fastg`, `write_genome`, `write_genome_fasta`, `write_contigs`, `write_contigs_fasta`) |
| `seqlab.diversity` | `DistanceMetric`, `richness`, `richness_map`, `simpsons_index`, `simpsons_map`, `jaccard_distance`, `bray_curtis_distance`, `get_distance`, `beta_diversity_matrix`, `sample_total`, `sum_of_minima`, `sum_of_maxima` |
| `seqlab.samples` | `read_freq_map`, `read_samples_from_directory`, `write_richness_csv`, `write_simpsons_csv`, `write_beta_diversity_matrix` |
| `seqlab.sequences` | `frequency_table`, `find_frequent_words`, `starting_indices`, `pattern_count`, `find_clumps`, `skew_array`, `minimum_skew`, `complement`, `reverse_complement` |
| `seqlab.numbers` | Factorials, GCDs, primes and sieves, permutations and combinations, perfect, Mersenne and twin primes, `largest_prime_factor` |
| `seqlab.automata` | Rule-table cellular automata: `Neighborhood`, `in_field`, `neighborhood_to_string`, `update_cell`, `update_board`, `play_automaton` |
| `seqlab.life` | Conway's Game of Life: `count_live_neighbors`, `update_cell`, `update_board`, `play_game_of_life`, `render_board` |

Errors are raised as `ValueError`, for example for empty strings where an
alignment needs text, an unknown distance metric or neighbourhood, or an
empty board.

## Alignment

```python
from seqlab.alignment import global_alignment, local_alignment, affine_alignment
from seqlab.distance import edit_distance, longest_common_subsequence

aligned = global_alignment("GATTACA", "GCATGCT", 1.0, 1.0, 3.0)
aligned.first, aligned.second          # two rows of equal length, "-" for gaps

local = local_alignment("GAGA", "GAT", 1.0, 1.0, 2.0)
local.alignment, local.start1, local.end1, local.start2, local.end2
# the aligned span of the first string is "GAGA"[local.start1:local.end1]

affine = affine_alignment(1, 3, 2, 1, "GA", "GTTA")
affine.score, affine.first, affine.second

edit_distance("kitten", "sitting")     # 3
longest_common_subsequence("AACCTTGG", "ACACTGTGA")
```

Match scores are rewards; mismatch and gap values are given as positive
penalties. `seqlab.fasta.write_alignment_fasta` writes an alignment with a
marker row between its two rows: `|` for a match, `.` for a mismatch and a
space for a gap.

## Assembly

```python
from seqlab.kmers import kmer_composition
from seqlab.assembler import greedy_assembler
from seqlab.overlap import make_overlap_network, average_out_degree

reads = kmer_composition("ACGTTGCA", 3)
greedy_assembler(reads)                # "ACGTTGCA"

network = make_overlap_network(reads, 1.0, 5.0, 1.0, 2.0)
average_out_degree(network)
```

`greedy_assembler` assumes perfect coverage and error-free, single-stranded
reads of equal length; it raises `ValueError` when the remaining reads can
no longer be joined to the genome. `simulate_reads_clean` and
`shuffle_strings` take an optional `random.Random` for reproducible results.

## Diversity

```python
from seqlab.diversity import DistanceMetric, beta_diversity_matrix, richness_map, simpsons_map

samples = {
    "site_a": {"E. coli": 4, "B. subtilis": 1},
    "site_b": {"E. coli": 2, "S. aureus": 3},
}
richness_map(samples)
simpsons_map(samples)
names, matrix = beta_diversity_matrix(samples, DistanceMetric.JACCARD)
```

Metrics may also be named by the strings `"Jaccard"` and `"Bray-Curtis"`.
`seqlab.samples.read_samples_from_directory` reads every file of a directory
as one sample (one species name per line), named after the file without
`.txt`.

## Commands

Three commands are installed. Each lists its options with `--help`.

### seqlab-align

```
seqlab-align global FILE1 FILE2 OUTPUT [--match 1.0] [--mismatch 1.0] [--gap 3.0]
seqlab-align local  FILE1 FILE2 OUTPUT [--match 1.0] [--mismatch 1.0] [--gap 1.0]
seqlab-align manhattan
```

`global` and `local` read one sequence from each FASTA file and write the
alignment to `OUTPUT`; the local output's headers give the span covered in
each string. `manhattan`, or no command at all, prints the best path
through a built-in 10-by-8 example grid, drawn with `*` on `.`.

### seqlab-assemble

```
seqlab-assemble [GENOME] [--read-length 150] [--probability 0.1]
                [--match 1.0] [--mismatch 5.0] [--gap 1.0]
                [--threshold 40.0] [--seed N]
```

Reads a genome from a FASTA file (default `Data/SARS-CoV_genome.fasta`),
keeps each of its k-mers of the read length as a read with the given
probability, builds the overlap network and prints the number of reads,
the number of nodes and the average out-degree.

### seqlab-metagenomics

```
seqlab-metagenomics [SAMPLE_DIR] [OUTPUT_DIR] [--year 2019]
```

Reads samples from `SAMPLE_DIR` (default `Data/2019_Samples`) and writes to
`OUTPUT_DIR` (default `Matrices`, created if needed)
`RichnessMap_<year>.csv`, `SimpsonsMap_<year>.csv`,
`JaccardBetaDiversityMatrix_<year>.csv` and
`BrayCurtisBetaDiversityMatrix_<year>.csv`.

## What the package does not do

- It does not trim transitive edges from overlap networks, and it does not
  walk a network to produce contigs; `write_contigs` and
  `write_contigs_fasta` only write contigs that you supply.
- The only assembler is the greedy k-mer assembler; there is no assembly
  from error-prone reads.
- There is no search of a query against a sequence database, and no
  coin-change solver.