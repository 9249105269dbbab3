"""
Core functionality of the 128 game: board construction, tile spawning and the slide-and-merge move.
"""

from __future__ import annotations

from numpy import argwhere, array, array_equal, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from onetwentyeight.core.types import BOARD_SIZE, Cell, Direction, MoveResult

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def empty_board() -> ndarray:
    """
    Create a board with every cell empty.

    Returns
    -------
    ndarray
        A ``BOARD_SIZE x BOARD_SIZE`` array of zeros.
    """
    return zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)


def clone_board(board: ndarray) -> ndarray:
    """Return an independent copy of the board."""
    return array(board, dtype=int64, copy=True)


def empty_cells(board: ndarray) -> list[Cell]:
    """
    List the empty cells of the board.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    list[Cell]
        Coordinates of cells equal to zero, in row-major order.
    """
    return [Cell(int(row), int(col)) for row, col in argwhere(board == 0)]


def max_tile(board: ndarray) -> int:
    """Return the largest tile on the board."""
    return int(board.max())


def spawn_tile(board: ndarray, rng: Generator | None = None) -> ndarray:
    """
    Place a new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. It is never modified.
    rng : Generator, optional
        Source of randomness; the module-level generator is used if omitted.

    Returns
    -------
    ndarray
        A new board with exactly one more tile, or the input board itself if it is full.

    Notes
    -----
    - The cell is drawn uniformly among the empty cells.
    - The value is drawn independently: 2 with probability 0.9, otherwise 4.
    """
    rng = rng if rng is not None else _GENERATOR

    cells = empty_cells(board)
    if not cells:
        return board

    # ##: Choose the position first, then the value.
    cell = cells[int(rng.integers(len(cells)))]
    value = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4

    new_board = clone_board(board)
    new_board[cell.row, cell.col] = value
    return new_board


def init_board(rng: Generator | None = None) -> ndarray:
    """
    Create the starting board: two tiles spawned on an empty board.

    Parameters
    ----------
    rng : Generator, optional
        Source of randomness.

    Returns
    -------
    ndarray
        A board with two tiles on two distinct cells.
    """
    return spawn_tile(spawn_tile(empty_board(), rng), rng)


def merge_line(line: ndarray) -> tuple[ndarray, int]:
    """
    Push one line to the left, merging adjacent equal values.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row or column, oriented so that tiles move toward index 0.

    Returns
    -------
    merged_line : ndarray
        The new line, padded with zeros to its original length.
    gained : int
        The sum of every tile created by a merge.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the line towards the end.
    - Each value can only be merged once per call: ``[2, 2, 2, 0]`` gives ``[4, 2, 0, 0]``.
    """
    non_zero = [int(value) for value in line if value != 0]

    result = []
    gained = 0

    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] + non_zero[i + 1]
            result.append(merged)
            gained += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    merged_line = zeros(len(line), dtype=int64)
    merged_line[: len(result)] = result
    return merged_line, gained


def _orient(board: ndarray, direction: Direction) -> ndarray:
    """
    View the board so that the push direction becomes "left".

    The projection is its own inverse, so it also maps the result back.
    """
    if direction is Direction.LEFT:
        return board
    if direction is Direction.RIGHT:
        return board[:, ::-1]
    if direction is Direction.UP:
        return board.T
    return board.T[:, ::-1]


def apply_move(board: ndarray, direction: Direction) -> MoveResult:
    """
    Push every row or column of the board in one direction.

    Parameters
    ----------
    board : ndarray
        The game board. It is never modified.
    direction : Direction
        Where the tiles are pushed.

    Returns
    -------
    MoveResult
        The new board, the score gained and whether any cell changed.

    Notes
    -----
    - Right and down are handled by reversing each line, reducing it, then reversing back.
    - Up and down work on the columns, read top to bottom.
    - No tile is spawned here; that is the caller's job, and only when ``moved`` is True.
    """
    direction = Direction(direction)
    new_board = clone_board(board)

    # ##: Writing through the oriented view updates new_board in place.
    lines = _orient(new_board, direction)
    gained = 0
    moved = False
    for i in range(BOARD_SIZE):
        merged_line, line_gain = merge_line(lines[i])
        if not array_equal(merged_line, lines[i]):
            moved = True
            lines[i] = merged_line
        gained += line_gain

    return MoveResult(board=new_board, gained=gained, moved=moved)
