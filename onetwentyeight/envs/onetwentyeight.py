"""128 game session: owns the current state and keeps the save slot in sync."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from onetwentyeight.core.session import new_state, transition
from onetwentyeight.core.types import RESET, SaveState
from onetwentyeight.storage import MemorySlot

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Slot(Protocol):
    """Interface of a save slot."""

    def load(self) -> SaveState | None: ...

    def save(self, state: SaveState) -> None: ...


class OneTwentyEight:
    """
    128 game session.

    This class holds the single state cell of a game. Every accepted command replaces the state with a new
    value and writes it to the save slot; ignored commands touch neither.
    """

    def __init__(self, slot: Slot | None = None, seed: int | None = None, rng: Generator | None = None):
        """
        Load the saved game, or start a new one.

        Parameters
        ----------
        slot : Slot, optional
            Where the game is saved (default is an in-memory slot).
        seed : int, optional
            Seed of the random generator used for spawning tiles.
        rng : Generator, optional
            Random generator to use instead of seeding a new one.
        """
        self._slot = slot if slot is not None else MemorySlot()
        self._rng = rng if rng is not None else default_rng(PCG64DXSM(seed))

        state = self._slot.load()
        if state is None:
            _logger.info("No saved game found, starting a new one")
            state = new_state(self._rng)
            self._slot.save(state)
        self._state = state

    @property
    def state(self) -> SaveState:
        """Current state. Treat it as read-only; use ``snapshot`` to hand it out."""
        return self._state

    @property
    def snapshot(self) -> SaveState:
        """
        Read-only copy of the current state.

        Returns
        -------
        SaveState
            A state whose board is a copy with the writeable flag cleared.
        """
        board = self._state.board.copy()
        board.flags.writeable = False
        return SaveState(board=board, score=self._state.score, terminal=self._state.terminal)

    @property
    def board(self) -> ndarray:
        return self.snapshot.board

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def is_finished(self) -> bool:
        return self._state.terminal

    def dispatch(self, command: Any) -> bool:
        """
        Apply one command.

        Parameters
        ----------
        command : Any
            ``RESET`` or a direction (``Direction``, ``"left"``, ``"ArrowLeft"``, ...).

        Returns
        -------
        bool
            True if the state changed and was saved, False if the command was ignored.
        """
        next_state = transition(self._state, command, self._rng)
        if next_state is self._state:
            return False

        self._state = next_state
        self._slot.save(next_state)
        return True

    def move(self, direction: Any) -> bool:
        """Push the tiles in one direction. Ignored once the game is over."""
        return self.dispatch(direction)

    def reset(self) -> SaveState:
        """
        Start a new game, discarding the current one.

        Returns
        -------
        SaveState
            Snapshot of the new game.
        """
        self.dispatch(RESET)
        return self.snapshot

    def render(self) -> None:
        """
        Render the game board. This method prints the score and the board to the console.
        """
        print(f"score: {self._state.score}")
        for row in self._state.board.tolist():
            print(" \t".join(str(value) if value else "." for value in row))
        if self._state.terminal:
            print("game over")
