# -*- coding: utf-8 -*-
"""
Game logic of the 128 game.

It includes the board model, tile spawning, the slide-and-merge move, terminal-state detection
and the pure state transition used by the game session.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    apply_move,
    clone_board,
    empty_board,
    empty_cells,
    init_board,
    max_tile,
    merge_line,
    spawn_tile,
)
from .gamemove import has_legal_move, illegal_directions, is_game_over, legal_directions, reached_target
from .session import new_state, transition
from .types import (
    BOARD_SIZE,
    MAX_CELL,
    RESET,
    TARGET_TILE,
    Cell,
    Direction,
    InvalidSaveState,
    MoveResult,
    SaveState,
    validate_board,
)

__all__ = [
    "BOARD_SIZE",
    "TARGET_TILE",
    "MAX_CELL",
    "TILE_SPAWN_PROBS",
    "RESET",
    "Cell",
    "Direction",
    "InvalidSaveState",
    "MoveResult",
    "SaveState",
    "validate_board",
    "empty_board",
    "clone_board",
    "empty_cells",
    "max_tile",
    "spawn_tile",
    "init_board",
    "merge_line",
    "apply_move",
    "reached_target",
    "has_legal_move",
    "is_game_over",
    "legal_directions",
    "illegal_directions",
    "new_state",
    "transition",
]
