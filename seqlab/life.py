"""Conway's Game of Life on a bounded board."""

from __future__ import annotations

from collections.abc import Sequence

Board = list[list[bool]]

_ALIVE = "⬛"
_DEAD = "⬜"


def _shape(board: Sequence[Sequence[bool]]) -> tuple[int, int]:
    if not board:
        raise ValueError("board is empty")
    return len(board), len(board[0])


def count_live_neighbors(board: Sequence[Sequence[bool]], row: int, col: int) -> int:
    """Return how many of the up to eight surrounding cells are alive."""
    rows, cols = _shape(board)
    return sum(
        1
        for i in range(max(row - 1, 0), min(row + 1, rows - 1) + 1)
        for j in range(max(col - 1, 0), min(col + 1, cols - 1) + 1)
        if board[i][j] and (i, j) != (row, col)
    )


def update_cell(board: Sequence[Sequence[bool]], row: int, col: int) -> bool:
    """Return whether the cell is alive in the next generation."""
    neighbours = count_live_neighbors(board, row, col)
    if board[row][col]:
        return neighbours in (2, 3)
    return neighbours == 3


def update_board(board: Sequence[Sequence[bool]]) -> Board:
    """Return the next generation of the board."""
    rows, cols = _shape(board)
    return [[update_cell(board, r, c) for c in range(cols)] for r in range(rows)]


def play_game_of_life(initial_board: Sequence[Sequence[bool]], num_gens: int) -> list[Board]:
    """Return the initial board followed by ``num_gens`` generations."""
    if num_gens < 0:
        raise ValueError(f"num_gens must not be negative, got {num_gens}")
    boards = [[list(row) for row in initial_board]]
    for _ in range(num_gens):
        boards.append(update_board(boards[-1]))
    return boards


def render_board(board: Sequence[Sequence[bool]]) -> str:
    """Draw the board with a dark square for live cells, each row ending in a newline."""
    return "".join("".join(_ALIVE if cell else _DEAD for cell in row) + "\n" for row in board)