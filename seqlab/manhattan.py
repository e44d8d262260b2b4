"""Maximum-weight paths through a grid (the Manhattan tourist problem)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import NamedTuple

EdgeMap = dict["Coordinate", dict["Coordinate", int]]


class Coordinate(NamedTuple):
    """A grid node as ``(row, col)``."""

    row: int
    col: int


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two grid nodes."""

    source: Coordinate
    target: Coordinate
    weight: int


def build_edge_map(edges: Iterable[Edge]) -> EdgeMap:
    """Index edges as ``{source: {target: weight}}``; later edges override earlier ones."""
    edge_map: EdgeMap = {}
    for edge in edges:
        edge_map.setdefault(Coordinate(*edge.source), {})[Coordinate(*edge.target)] = edge.weight
    return edge_map


def find_edge(edge_map: Mapping[Coordinate, Mapping[Coordinate, int]], source, target) -> int:
    """Return the weight of the edge from ``source`` to ``target``, or 0 if there is none."""
    return edge_map.get(source, {}).get(target, 0)


def manhattan_tourist_score(n: int, m: int, edge_map) -> list[list[int]]:
    """Return the table of best path weights from ``(0, 0)`` to every node of an n-by-m grid."""
    if n < 1 or m < 1:
        raise ValueError(f"grid must have at least one row and column, got {n}x{m}")
    table = [[0] * m for _ in range(n)]
    for j in range(1, m):
        table[0][j] = table[0][j - 1] + find_edge(edge_map, Coordinate(0, j - 1), Coordinate(0, j))
    for i in range(1, n):
        table[i][0] = table[i - 1][0] + find_edge(edge_map, Coordinate(i - 1, 0), Coordinate(i, 0))
    for i in range(1, n):
        for j in range(1, m):
            here = Coordinate(i, j)
            up = table[i - 1][j] + find_edge(edge_map, Coordinate(i - 1, j), here)
            left = table[i][j - 1] + find_edge(edge_map, Coordinate(i, j - 1), here)
            table[i][j] = max(up, left)
    return table


def manhattan_tourist(n: int, m: int, edges: Iterable[Edge]) -> list[Coordinate]:
    """Return a maximum-weight path, listed from ``(n-1, m-1)`` back to ``(0, 0)``.

    Where both moves tie, the path steps up.
    """
    edge_map = build_edge_map(edges)
    table = manhattan_tourist_score(n, m, edge_map)

    i, j = n - 1, m - 1
    path = [Coordinate(i, j)]
    while i > 0 or j > 0:
        if j == 0:
            i -= 1
        elif i == 0:
            j -= 1
        else:
            up = table[i - 1][j] + find_edge(edge_map, Coordinate(i - 1, j), Coordinate(i, j))
            if up == table[i][j]:
                i -= 1
            else:
                j -= 1
        path.append(Coordinate(i, j))
    return path


def render_path(n: int, m: int, path: Sequence[Coordinate]) -> str:
    """Draw an n-by-m grid with ``.`` for empty cells and ``*`` for cells on the path."""
    grid = [["."] * m for _ in range(n)]
    for row, col in path:
        if not (0 <= row < n and 0 <= col < m):
            raise ValueError(f"coordinate ({row}, {col}) lies outside a {n}x{m} grid")
        grid[row][col] = "*"
    return "\n".join("".join(line) for line in grid)