"""Tile palette shared by the graphical and console shells."""

# ##: Background colour per tile value.
TILE_COLORS = {
    0: "#cdc1b4",
    2: "#eee4da",
    4: "#ede0c8",
    8: "#f2b179",
    16: "#f59563",
    32: "#f67c5f",
    64: "#f65e3b",
    128: "#edcf72",
    256: "#edcc61",
    512: "#edc850",
    1024: "#edc53f",
    2048: "#edc22e",
}
FALLBACK_COLOR = "#3c3a32"

DARK_TEXT = "#776e65"
LIGHT_TEXT = "#f9f6f2"


def tile_color(value: int) -> str:
    """Background colour of a tile."""
    return TILE_COLORS.get(int(value), FALLBACK_COLOR)


def text_color(value: int) -> str:
    """Label colour of a tile: dark on the two lightest tiles, light otherwise."""
    return DARK_TEXT if int(value) <= 4 else LIGHT_TEXT


def tile_label(value: int) -> str:
    """Text shown on a tile; empty cells show nothing."""
    return str(int(value)) if value else ""


def tile_font_size(value: int) -> int:
    """Label size in points, shrinking as the number gets longer."""
    value = int(value)
    if value >= 1024:
        return 30
    if value >= 128:
        return 32
    if value >= 16:
        return 34
    return 36
