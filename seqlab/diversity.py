"""Alpha and beta diversity measures over species frequency maps."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Union

FreqMap = Mapping[str, int]


class DistanceMetric(str, Enum):
    """Beta diversity distance between two samples."""

    BRAY_CURTIS = "Bray-Curtis"
    JACCARD = "Jaccard"


def sample_total(freq_map: FreqMap) -> int:
    """Return the sum of all counts in a sample."""
    return sum(freq_map.values())


def sum_of_minima(map1: FreqMap, map2: FreqMap) -> int:
    """Sum, over the keys present in both maps, the smaller of the two counts."""
    return sum(min(count, map2[key]) for key, count in map1.items() if key in map2)


def sum_of_maxima(map1: FreqMap, map2: FreqMap) -> int:
    """Sum, over all keys of either map, the larger count (missing counts as 0).

    Raises ``ValueError`` when the sum is zero, since it is used as a divisor.
    """
    total = sum(max(map1.get(key, 0), map2.get(key, 0)) if key in map1 else map2[key] for key in map2)
    total += sum(count for key, count in map1.items() if key not in map2)
    if total == 0:
        raise ValueError("no species counted in the two maps given to sum_of_maxima")
    return total


def jaccard_distance(map1: FreqMap, map2: FreqMap) -> float:
    """Return the Jaccard distance between two frequency maps."""
    return 1 - sum_of_minima(map1, map2) / sum_of_maxima(map1, map2)


def bray_curtis_distance(map1: FreqMap, map2: FreqMap) -> float:
    """Return the Bray-Curtis distance between two frequency maps."""
    total1 = sample_total(map1)
    total2 = sample_total(map2)
    if total1 == 0 or total2 == 0:
        raise ValueError("sample given to bray_curtis_distance has no positive values")
    return 1 - sum_of_minima(map1, map2) / ((total1 + total2) / 2.0)


def _as_metric(metric: Union[DistanceMetric, str]) -> DistanceMetric:
    try:
        return DistanceMetric(metric)
    except ValueError:
        raise ValueError(f"invalid distance metric: {metric!r}") from None


def get_distance(map1: FreqMap, map2: FreqMap, metric: Union[DistanceMetric, str]) -> float:
    """Return the distance between two samples under the named metric."""
    if _as_metric(metric) is DistanceMetric.BRAY_CURTIS:
        return bray_curtis_distance(map1, map2)
    return jaccard_distance(map1, map2)


def beta_diversity_matrix(
    all_maps: Mapping[str, FreqMap], metric: Union[DistanceMetric, str]
) -> tuple[list[str], list[list[float]]]:
    """Return the sorted sample names and the symmetric matrix of pairwise distances.

    Diagonal entries are zero.
    """
    chosen = _as_metric(metric)
    names = sorted(all_maps)
    size = len(names)
    distances = [[0.0] * size for _ in range(size)]
    for i, first in enumerate(names):
        for j in range(i + 1, size):
            value = get_distance(all_maps[first], all_maps[names[j]], chosen)
            distances[i][j] = value
            distances[j][i] = value
    return names, distances


def richness(sample: FreqMap) -> int:
    """Return the number of species with a positive count."""
    return sum(1 for count in sample.values() if count > 0)


def richness_map(all_maps: Mapping[str, FreqMap]) -> dict[str, int]:
    """Return the richness of every sample."""
    return {name: richness(sample) for name, sample in all_maps.items()}


def simpsons_index(sample: FreqMap) -> float:
    """Return the probability that two draws with replacement hit the same species."""
    total = sample_total(sample)
    if total == 0:
        raise ValueError("empty frequency map given to simpsons_index")
    return sum((count / total) ** 2 for count in sample.values())


def simpsons_map(all_maps: Mapping[str, FreqMap]) -> dict[str, float]:
    """Return Simpson's index of every sample."""
    return {name: simpsons_index(sample) for name, sample in all_maps.items()}