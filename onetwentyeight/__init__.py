# -*- coding: utf-8 -*-
"""
Sliding-tile merge puzzle that stops at 128.
"""

from .config import GameConfig
from .core import RESET, Direction, SaveState
from .envs import OneTwentyEight
from .storage import MemorySlot, SaveSlot

__version__ = "0.1.0"

__all__ = ["GameConfig", "Direction", "RESET", "SaveState", "OneTwentyEight", "SaveSlot", "MemorySlot"]
