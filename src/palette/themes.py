from __future__ import annotations

"""Named, curated theme palettes.

A theme name resolves to a fixed five-color palette. Names outside the
catalog fall back to a monochromatic palette over a random base color;
:class:`ThemeMatch` records which of the two paths produced the colors.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .color_types import random_color
from .harmony import PaletteType, generate_colors


logger = logging.getLogger(__name__)


THEME_PALETTES: Dict[str, Tuple[str, ...]] = {
    "sunset": ("#ff6f61", "#de5d83", "#ffdab9", "#2e1a47", "#592941"),
    "ocean": ("#004e64", "#00a5cf", "#9fffcb", "#eef5db", "#25a18e"),
    "forest": ("#40531b", "#618c03", "#86a92d", "#c7d99d", "#d8e5bb"),
    "minimal": ("#ffffff", "#f5f5f5", "#cfcfcf", "#333333", "#000000"),
    "retro": ("#f25f5c", "#ffe066", "#247ba0", "#70c1b3", "#50514f"),
    "pastel": ("#ffa5ab", "#ffdbaa", "#ffecbb", "#c8e7ed", "#a7bed3"),
    "neon": ("#00ffff", "#ff00ff", "#ffff00", "#00ff00", "#ff0000"),
    "beach": ("#ead6cd", "#f9a66c", "#3cbbb1", "#266a7a", "#f5cdaa"),
    "space": ("#1e2237", "#4c3b71", "#a26c64", "#f3b391", "#171420"),
    "autumn": ("#db504a", "#ff6f59", "#ffb140", "#e3b04b", "#624c2b"),
    "winter": ("#ffffff", "#e0fbfc", "#98c1d9", "#3d5a80", "#293241"),
    "spring": ("#e5f9bd", "#a3e0a6", "#57cc99", "#38a3a5", "#22577a"),
    "summer": ("#f15bb5", "#fee440", "#00bbf9", "#00f5d4", "#9b5de5"),
    "fire": ("#ff0000", "#ff4000", "#ff8000", "#ffc000", "#ffff00"),
    "ice": ("#ffffff", "#e3f4f4", "#d7eaea", "#9dd7d7", "#8bcaca"),
    "earth": ("#5f4b32", "#7a6346", "#795c3d", "#92734a", "#ad9165"),
    "nature": ("#4e6a45", "#7a9972", "#a5c296", "#d5f4d6", "#e5ffdf"),
}


@dataclass(frozen=True)
class ThemeMatch:
    """Result of a theme lookup.

    Attributes
    ----------
    name:
        Normalized (trimmed, lowercased) lookup key.
    matched:
        True when ``name`` is in the catalog; False when ``colors`` came
        from the monochromatic fallback.
    colors:
        Ordered palette colors.
    """

    name: str
    matched: bool
    colors: List[str]


def theme_names() -> List[str]:
    """Return catalog theme names in catalog order."""
    return list(THEME_PALETTES)


def theme_palette(name: str, rng: Optional[np.random.Generator] = None) -> ThemeMatch:
    """Look up ``name`` in the catalog, case-insensitively."""
    key = name.strip().lower()
    colors = THEME_PALETTES.get(key)
    if colors is not None:
        return ThemeMatch(name=key, matched=True, colors=list(colors))

    base = random_color(rng)
    logger.debug("no theme named %r; generating monochromatic palette from %s", key, base)
    return ThemeMatch(
        name=key,
        matched=False,
        colors=generate_colors(PaletteType.MONOCHROMATIC, base),
    )
