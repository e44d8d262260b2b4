"""Two-dimensional cellular automata driven by neighbourhood rule tables."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Union

Board = list[list[int]]


class Neighborhood(str, Enum):
    """Which neighbouring cells a rule looks at."""

    MOORE = "Moore"
    VON_NEUMANN = "vonNewmann"


_OFFSETS = {
    Neighborhood.MOORE: ((-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1)),
    Neighborhood.VON_NEUMANN: ((-1, 0), (0, 1), (1, 0), (0, -1)),
}


def _as_neighborhood(kind: Union[Neighborhood, str]) -> Neighborhood:
    try:
        return Neighborhood(kind)
    except ValueError:
        raise ValueError(f"invalid neighborhood type {kind!r}") from None


def _shape(board: Sequence[Sequence[int]]) -> tuple[int, int]:
    if not board:
        raise ValueError("board is empty")
    return len(board), len(board[0])


def in_field(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Return whether ``(row, col)`` lies on the board."""
    rows, cols = _shape(board)
    return 0 <= row < rows and 0 <= col < cols


def neighborhood_to_string(
    board: Sequence[Sequence[int]], row: int, col: int, neighborhood: Union[Neighborhood, str]
) -> str:
    """Return the cell's state followed by its neighbours' states, clockwise from the top.

    Moore neighbourhoods start at the top-left neighbour. Cells off the board read as 0.
    """
    offsets = _OFFSETS[_as_neighborhood(neighborhood)]
    states = [str(board[row][col])]
    for dr, dc in offsets:
        r, c = row + dr, col + dc
        states.append(str(board[r][c]) if in_field(board, r, c) else "0")
    return "".join(states)


def update_cell(
    board: Sequence[Sequence[int]],
    row: int,
    col: int,
    neighborhood: Union[Neighborhood, str],
    rules: Mapping[str, int],
) -> int:
    """Return the cell's next state; neighbourhoods without a rule give 0."""
    return rules.get(neighborhood_to_string(board, row, col, neighborhood), 0)


def update_board(
    board: Sequence[Sequence[int]], neighborhood: Union[Neighborhood, str], rules: Mapping[str, int]
) -> Board:
    """Return the next generation of the whole board."""
    rows, cols = _shape(board)
    kind = _as_neighborhood(neighborhood)
    return [[update_cell(board, r, c, kind, rules) for c in range(cols)] for r in range(rows)]


def play_automaton(
    initial_board: Sequence[Sequence[int]],
    num_gens: int,
    neighborhood: Union[Neighborhood, str],
    rules: Mapping[str, int],
) -> list[Board]:
    """Return the initial board followed by ``num_gens`` generations."""
    if num_gens < 0:
        raise ValueError(f"num_gens must not be negative, got {num_gens}")
    boards = [[list(row) for row in initial_board]]
    for _ in range(num_gens):
        boards.append(update_board(boards[-1], neighborhood, rules))
    return boards