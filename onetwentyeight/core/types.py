# -*- coding: utf-8 -*-
"""
Set of types shared by the game logic, the session and the storage.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from numpy import array, array_equal, int64, ndarray

# ##: Board dimension and stop threshold of this variant. Both are fixed.
BOARD_SIZE = 4
TARGET_TILE = 128

# ##: Largest tile an int64 board can hold.
MAX_CELL = 2**62

# ##: Explicit new-game command.
RESET = "reset"


class InvalidSaveState(ValueError):
    """Raised when a stored record does not match the save schema."""


class Direction(str, Enum):
    """
    Direction the tiles are pushed toward.
    """

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, value: Any) -> Direction | None:
        """
        Map a user command onto a direction.

        Parameters
        ----------
        value : Any
            A ``Direction``, a direction name (``"left"``) or an arrow key name (``"ArrowLeft"``).

        Returns
        -------
        Direction | None
            The matching direction, or None if the value is not recognised.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        name = value.strip().lower()
        if name.startswith("arrow"):
            name = name[len("arrow") :]
        try:
            return cls(name)
        except ValueError:
            return None


class Cell(NamedTuple):
    """Coordinate of one board cell."""

    row: int
    col: int


class MoveResult(NamedTuple):
    """Outcome of pushing the whole board in one direction."""

    board: ndarray
    gained: int
    moved: bool


def validate_board(board: Any) -> ndarray:
    """
    Convert a nested sequence into a board, checking the board invariants.

    Parameters
    ----------
    board : Any
        Nested sequence (or array) of integers.

    Returns
    -------
    ndarray
        A new ``BOARD_SIZE x BOARD_SIZE`` int64 array.

    Raises
    ------
    InvalidSaveState
        If the shape is wrong or a cell is neither 0 nor a power of two >= 2.
    """
    if isinstance(board, (str, bytes)):
        raise InvalidSaveState("board must be a nested sequence of integers")

    rows = list(board) if not isinstance(board, ndarray) else board.tolist()
    if len(rows) != BOARD_SIZE:
        raise InvalidSaveState(f"board must have {BOARD_SIZE} rows, got {len(rows)}")

    for row in rows:
        if isinstance(row, (str, bytes)) or not hasattr(row, "__len__") or len(row) != BOARD_SIZE:
            raise InvalidSaveState(f"every board row must have {BOARD_SIZE} cells")
        for value in row:
            # ##: bool is an int subclass but never a valid tile.
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSaveState(f"board cell {value!r} is not an integer")
            if value != 0 and (value < 2 or value > MAX_CELL or value & (value - 1)):
                raise InvalidSaveState(f"board cell {value} is not 0 or a power of two")

    return array(rows, dtype=int64)


@dataclass(frozen=True, eq=False)
class SaveState:
    """
    Entire durable state of one game.

    Attributes
    ----------
    board : ndarray
        The current board.
    score : int
        Sum of every merge since the last new game.
    terminal : bool
        Whether the game is over; directional commands are ignored while it is set.
    """

    board: ndarray
    score: int = 0
    terminal: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SaveState):
            return NotImplemented
        return (
            self.score == other.score
            and self.terminal == other.terminal
            and array_equal(self.board, other.board)
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Serialise into the storage schema.

        Returns
        -------
        dict
            ``{"board": [[int]], "score": int, "gameOver": bool}`` with plain Python values.
        """
        return {
            "board": [[int(value) for value in row] for row in self.board.tolist()],
            "score": int(self.score),
            "gameOver": bool(self.terminal),
        }

    @classmethod
    def from_dict(cls, data: Any) -> SaveState:
        """
        Build a state from a stored record.

        Parameters
        ----------
        data : Any
            Decoded JSON record.

        Returns
        -------
        SaveState
            The validated state.

        Raises
        ------
        InvalidSaveState
            If the record does not follow the storage schema.
        """
        if not isinstance(data, dict):
            raise InvalidSaveState("save record must be an object")

        missing = {"board", "score", "gameOver"} - set(data)
        if missing:
            raise InvalidSaveState(f"save record is missing {sorted(missing)}")

        score, terminal = data["score"], data["gameOver"]
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise InvalidSaveState(f"score must be a non-negative integer, got {score!r}")
        if not isinstance(terminal, bool):
            raise InvalidSaveState(f"gameOver must be a boolean, got {terminal!r}")

        return cls(board=validate_board(data["board"]), score=score, terminal=terminal)
