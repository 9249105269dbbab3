# -*- coding: utf-8 -*-
"""
Stateful game session.

This module provides the `OneTwentyEight` class, which owns the current game state and its save slot.
"""

from .onetwentyeight import OneTwentyEight

__all__ = ["OneTwentyEight"]
