"""
Terminal-state detection and legal-move utilities for the 128 game.
"""

from numpy import ndarray

from onetwentyeight.core.types import TARGET_TILE, Direction


def _can_move_direction(board: ndarray, direction: Direction) -> bool:
    """
    Check if a move is possible in a specific direction without rotation.

    Parameters
    ----------
    board : ndarray
        The game board to check.
    direction : Direction
        Direction to check.

    Returns
    -------
    bool
        True if the move would change the board, False otherwise.
    """
    if direction in (Direction.LEFT, Direction.RIGHT):
        first, second = board[:, :-1], board[:, 1:]
    else:
        first, second = board[:-1, :], board[1:, :]

    # ##>: first is the cell nearer the push target for left/up, second for right/down.
    if direction in (Direction.LEFT, Direction.UP):
        can_slide = (first == 0) & (second != 0)
    else:
        can_slide = (second == 0) & (first != 0)
    can_merge = (first != 0) & (first == second)

    return bool(can_slide.any() or can_merge.any())


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions, in declaration order.
    """
    return [direction for direction in Direction if _can_move_direction(board, direction)]


def illegal_directions(board: ndarray) -> list[Direction]:
    """Determine the directions that would leave the board unchanged."""
    return [direction for direction in Direction if not _can_move_direction(board, direction)]


def reached_target(board: ndarray) -> bool:
    """
    Check whether any tile reached the stop threshold.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    bool
        True if a cell is greater or equal to ``TARGET_TILE``.
    """
    return bool((board >= TARGET_TILE).any())


def has_legal_move(board: ndarray) -> bool:
    """
    Check if at least one direction can still change the board.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    bool
        True if there is an empty cell or two orthogonally adjacent equal tiles.

    Notes
    -----
    Only right and down neighbours are compared, which covers every adjacent pair once.
    """
    if (board == 0).any():
        return True

    horizontal = (board[:, :-1] != 0) & (board[:, :-1] == board[:, 1:])
    vertical = (board[:-1, :] != 0) & (board[:-1, :] == board[1:, :])
    return bool(horizontal.any() or vertical.any())


def is_game_over(board: ndarray) -> bool:
    """
    Check if the game has ended.

    The game ends when the target tile is reached or when no move can change the board.
    """
    return reached_target(board) or not has_legal_move(board)
