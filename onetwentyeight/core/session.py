"""
Pure state transitions of a game: ``(state, command) -> state``.
"""

from __future__ import annotations

import logging
from typing import Any

from numpy.random import Generator

from onetwentyeight.core.gameboard import apply_move, init_board, spawn_tile
from onetwentyeight.core.gamemove import is_game_over
from onetwentyeight.core.types import RESET, Direction, SaveState

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def new_state(rng: Generator | None = None) -> SaveState:
    """
    Start a new game.

    Parameters
    ----------
    rng : Generator, optional
        Source of randomness for the two starting tiles.

    Returns
    -------
    SaveState
        Fresh board, zero score, not terminal.
    """
    return SaveState(board=init_board(rng), score=0, terminal=False)


def transition(state: SaveState, command: Any, rng: Generator | None = None) -> SaveState:
    """
    Apply one command to a state.

    Parameters
    ----------
    state : SaveState
        The current state. It is never modified.
    command : Any
        ``RESET`` or anything ``Direction.parse`` understands.
    rng : Generator, optional
        Source of randomness for the spawned tile.

    Returns
    -------
    SaveState
        The next state. The very same object is returned when the command is ignored:
        unknown command, direction while the game is over, or a move that changes nothing.
    """
    if command == RESET:
        return new_state(rng)

    direction = Direction.parse(command)
    if direction is None or state.terminal:
        return state

    result = apply_move(state.board, direction)
    if not result.moved:
        return state

    # ##: Spawn only after a real move.
    board = spawn_tile(result.board, rng)
    terminal = is_game_over(board)
    _logger.debug("Moved %s, gained %d", direction.value, result.gained)
    if terminal:
        _logger.info("Game over with score %d", state.score + result.gained)

    return SaveState(board=board, score=state.score + result.gained, terminal=terminal)
