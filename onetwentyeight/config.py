"""
Runtime configuration of the game.

The board size and the target tile are fixed by the game and are not part of the configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from onetwentyeight.storage import STORAGE_KEY


@dataclass
class GameConfig:
    """
    Configuration of a game session and of its shell.
    """

    # ##>: Storage parameters.
    store_path: Path = field(default_factory=lambda: Path.home() / ".onetwentyeight" / "storage.json")
    storage_key: str = STORAGE_KEY

    # ##>: Randomness (None draws a fresh seed).
    seed: int | None = None

    # ##>: Logging.
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GameConfig:
        """
        Build a configuration, overriding defaults from environment variables.

        Parameters
        ----------
        environ : dict, optional
            Mapping to read instead of ``os.environ``.

        Returns
        -------
        GameConfig
            ``ONETWENTYEIGHT_STORE``, ``ONETWENTYEIGHT_SEED`` and ``ONETWENTYEIGHT_LOG_LEVEL`` applied.

        Raises
        ------
        ValueError
            If ``ONETWENTYEIGHT_SEED`` is not an integer.
        """
        environ = os.environ if environ is None else environ
        config = cls()

        if environ.get("ONETWENTYEIGHT_STORE"):
            config = replace(config, store_path=Path(environ["ONETWENTYEIGHT_STORE"]).expanduser())
        if environ.get("ONETWENTYEIGHT_SEED"):
            config = replace(config, seed=int(environ["ONETWENTYEIGHT_SEED"]))
        if environ.get("ONETWENTYEIGHT_LOG_LEVEL"):
            config = replace(config, log_level=environ["ONETWENTYEIGHT_LOG_LEVEL"].upper())
        return config
