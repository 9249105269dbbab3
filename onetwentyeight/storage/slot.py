"""
Durable save slot for one game.

The slot mimics a browser key-value store: a single JSON document on disk maps keys to JSON text,
and the game record lives under one fixed key.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from onetwentyeight.core.types import InvalidSaveState, SaveState

# ##>: Fixed key of the game record.
STORAGE_KEY = "2048:v1"

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class SaveSlot:
    """
    Save slot stored in a JSON file.

    Parameters
    ----------
    path : str | Path
        Location of the JSON document.
    key : str
        Key of the game record inside the document.

    Notes
    -----
    - ``load`` never raises: missing, unreadable or malformed data all read as "nothing saved".
    - ``save`` never raises either; a failed write is logged and the in-memory state stays authoritative.
    """

    def __init__(self, path: str | Path, key: str = STORAGE_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _read_document(self) -> dict:
        with self.path.open("r", encoding="utf-8") as file_h:
            document = json.load(file_h)
        if not isinstance(document, dict):
            raise InvalidSaveState("storage document must be an object")
        return document

    def _write_document(self, document: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # ##: Write aside then swap, so a crash never leaves a half-written file.
        handle, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as file_h:
                json.dump(document, file_h)
            os.replace(tmp_name, self.path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def load(self) -> SaveState | None:
        """
        Read the saved game.

        Returns
        -------
        SaveState | None
            The saved state, or None when nothing usable is stored.
        """
        try:
            document = self._read_document()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError, InvalidSaveState) as error:
            _logger.warning("Cannot read storage %s: %s", self.path, error)
            return None

        raw = document.get(self.key)
        if raw is None:
            return None

        try:
            return SaveState.from_dict(json.loads(raw) if isinstance(raw, str) else raw)
        except (json.JSONDecodeError, RecursionError, InvalidSaveState) as error:
            _logger.warning("Ignoring malformed save under %r: %s", self.key, error)
            return None

    def save(self, state: SaveState) -> None:
        """
        Overwrite the saved game.

        Parameters
        ----------
        state : SaveState
            State to store. Other keys of the document are preserved.
        """
        try:
            try:
                document = self._read_document()
            except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError, InvalidSaveState):
                document = {}
            document[self.key] = json.dumps(state.to_dict())
            self._write_document(document)
        except (OSError, TypeError, ValueError) as error:
            _logger.warning("Cannot save game to %s: %s", self.path, error)

    def clear(self) -> None:
        """Forget the saved game, keeping other keys."""
        try:
            document = self._read_document()
        except FileNotFoundError:
            return
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError, InvalidSaveState) as error:
            _logger.warning("Cannot read storage %s: %s", self.path, error)
            return

        if document.pop(self.key, None) is not None:
            try:
                self._write_document(document)
            except OSError as error:
                _logger.warning("Cannot clear game in %s: %s", self.path, error)


class MemorySlot:
    """Save slot kept in memory, for sessions that do not persist."""

    def __init__(self, key: str = STORAGE_KEY):
        self.key = key
        self._records: dict[str, str] = {}

    def load(self) -> SaveState | None:
        raw = self._records.get(self.key)
        if raw is None:
            return None
        try:
            return SaveState.from_dict(json.loads(raw))
        except (json.JSONDecodeError, RecursionError, InvalidSaveState) as error:
            _logger.warning("Ignoring malformed save under %r: %s", self.key, error)
            return None

    def save(self, state: SaveState) -> None:
        self._records[self.key] = json.dumps(state.to_dict())

    def clear(self) -> None:
        self._records.pop(self.key, None)
