# -*- coding: utf-8 -*-
"""
Presentation helpers: tile palette and labels.

The Matplotlib window lives in `onetwentyeight.utils.windows` and is imported on demand.
"""

from .colors import text_color, tile_color, tile_font_size, tile_label

__all__ = ["tile_color", "text_color", "tile_font_size", "tile_label"]
