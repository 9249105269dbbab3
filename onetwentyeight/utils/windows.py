# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 128 game.

This module draws the game board in a Matplotlib window and forwards keyboard events to a handler.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event

from onetwentyeight.core.gamemove import reached_target
from onetwentyeight.core.types import TARGET_TILE, SaveState
from onetwentyeight.utils.colors import text_color, tile_color, tile_font_size, tile_label


def banner_text(state: SaveState) -> str:
    """
    Message shown over a finished board.

    Parameters
    ----------
    state : SaveState
        State to describe.

    Returns
    -------
    str
        Empty while the game is running.
    """
    if not state.terminal:
        return ""
    if reached_target(state.board):
        return f"You reached {TARGET_TILE}!"
    return "No moves left"


class WindowBoard:
    """
    A class for rendering the game board using Matplotlib.

    Methods
    -------
    show_state(state: SaveState)
        Update the display with the current game state.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Create one sub-axis per cell, plus the banner used once the game is over.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#bbada0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize=tile_font_size(0), fontweight="heavy")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

        self.banner = self.fig.text(
            0.5,
            0.45,
            "",
            ha="center",
            va="center",
            fontsize="xx-large",
            fontweight="heavy",
            bbox={"facecolor": "white", "alpha": 0.85, "boxstyle": "round"},
            visible=False,
        )

    def _close_handler(self, event: Optional[Event] = None):
        """Flag the window as closed when Matplotlib closes it."""
        self.closed = True

    def show_state(self, state: SaveState):
        """
        Show or update the game board, the score and the game-over banner.

        Parameters
        ----------
        state : SaveState
            The state to display.
        """
        for ax, text, value in zip(self.axes, self.texts, state.board.flat):
            value = int(value)
            text.set_text(tile_label(value))
            text.set_color(text_color(value))
            text.set_fontsize(tile_font_size(value))
            ax.set_facecolor(tile_color(value))

        self.fig.suptitle(f"Score: {state.score}", fontweight="bold")

        message = banner_text(state)
        self.banner.set_text(message)
        self.banner.set_visible(bool(message))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
