# -*- coding: utf-8 -*-
"""
Play the 128 game with the keyboard.
"""
import logging
from argparse import ArgumentParser
from pathlib import Path
from typing import Any, Optional

from onetwentyeight import RESET, GameConfig, OneTwentyEight, SaveSlot

# ##: Keys of the console mode.
TEXT_KEYS = {"a": "left", "d": "right", "w": "up", "s": "down", "n": RESET}


def redraw(window: Any, envs: OneTwentyEight):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    envs: OneTwentyEight
        The game session
    """
    window.show_state(envs.snapshot)


def key_handler(envs: OneTwentyEight, window: Any, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: OneTwentyEight
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key in ("backspace", "n"):
        envs.reset()
        redraw(window, envs)
        return None

    if envs.move(event.key):
        redraw(window, envs)
    return None


def play_text(envs: OneTwentyEight, read: Optional[Any] = None):
    """
    Play in the console, reading one command per line.

    Parameters
    ----------
    envs: OneTwentyEight
        The game session

    read: Callable, optional
        Function returning the next line (default is ``input``)
    """
    read = read if read is not None else input
    envs.render()
    while True:
        try:
            key = read("w/a/s/d, n: new game, q: quit > ").strip().lower()
        except EOFError:
            return None
        if key == "q":
            return None
        if envs.dispatch(TEXT_KEYS.get(key, key)):
            envs.render()


def main(argv: Optional[list] = None):
    config = GameConfig.from_env()

    parser = ArgumentParser(description="Play the 128 game.")
    parser.add_argument("--store", type=Path, default=config.store_path, help="JSON file holding the saved game")
    parser.add_argument("--seed", type=int, default=config.seed)
    parser.add_argument("--fresh", action="store_true", help="discard the saved game")
    parser.add_argument("--text", action="store_true", help="play in the console instead of a window")
    parser.add_argument("--log-level", default=config.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    slot = SaveSlot(args.store, key=config.storage_key)
    if args.fresh:
        slot.clear()
    env = OneTwentyEight(slot=slot, seed=args.seed)

    if args.text:
        play_text(env)
        return

    from onetwentyeight.utils.windows import WindowBoard

    window_board = WindowBoard(title="128 Game", size=env.board.shape[0])
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))
    redraw(window_board, env)

    # Blocking event loop
    window_board.show(block=True)


if __name__ == "__main__":
    main()
