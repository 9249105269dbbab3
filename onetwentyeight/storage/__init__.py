# -*- coding: utf-8 -*-
"""
Persistence of the game record.
"""

from .slot import STORAGE_KEY, MemorySlot, SaveSlot

__all__ = ["STORAGE_KEY", "SaveSlot", "MemorySlot"]
