from __future__ import annotations

"""Light/dark classification for choosing overlay text colors."""

from util.color import to_u8_rgb


# Brightness above this (out of 255) counts as light.
LIGHTNESS_THRESHOLD = 155.0

DARK_TEXT = "#333333"
LIGHT_TEXT = "#ffffff"


def perceived_brightness(color: str) -> float:
    """Return BT.601 luma of ``color`` in [0, 255]."""
    r, g, b = to_u8_rgb(color)
    return (r * 299 + g * 587 + b * 114) / 1000.0


def is_light(color: str) -> bool:
    return perceived_brightness(color) > LIGHTNESS_THRESHOLD


def text_color_for(color: str) -> str:
    """Return a readable text color to draw on top of ``color``."""
    return DARK_TEXT if is_light(color) else LIGHT_TEXT
