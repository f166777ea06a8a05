from __future__ import annotations

"""High-level public API for generating color palettes.

This module provides the generation entry points consumed by the
presentation layer: :func:`generate_by_theory` picks (or accepts) a base
color and applies a color-theory rule, and :func:`generate_by_theme_name`
resolves a theme name through the catalog.
"""

import logging
from typing import List, Optional

import numpy as np

from util.utils import config_section

from .color_types import random_color
from .engine import ColorEngine
from .harmony import DEFAULT_COUNT, PaletteType, generate_colors
from .themes import theme_palette


logger = logging.getLogger(__name__)


def _default_count() -> int:
    value = config_section("generation").get("default_count")
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return DEFAULT_COUNT


def generate_by_theory(
    theory: PaletteType | str,
    base_color: Optional[str] = None,
    count: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    engine: Optional[ColorEngine] = None,
) -> List[str]:
    """Generate a palette from a color-theory rule.

    Parameters
    ----------
    theory:
        PaletteType or its name. Unknown names fall back to
        monochromatic.
    base_color:
        Hex base color. If None, one is drawn uniformly at random.
    count:
        Number of samples for the monochromatic/analogous rules. If None,
        the config value ``generation.default_count`` (default 5) is used.
        The other rules always return five colors.
    rng:
        Generator used for the random base color. If None, the shared
        generator from :func:`palette.color_types.default_rng` is used.
    engine:
        Optional ColorEngine for color space conversions.

    Returns
    -------
    list of str
        Ordered ``"#rrggbb"`` colors.
    """
    try:
        palette_type = PaletteType.from_value(theory)
    except ValueError:
        logger.warning("unknown color theory %r; using monochromatic", theory)
        palette_type = PaletteType.MONOCHROMATIC

    if count is None:
        count = _default_count()
    if base_color is None:
        base_color = random_color(rng)
    return generate_colors(palette_type, base_color, count, engine)


def generate_by_theme_name(
    text: str,
    rng: Optional[np.random.Generator] = None,
) -> List[str]:
    """Return the colors of the theme named ``text``.

    Unknown names produce a monochromatic palette over a random base; use
    :func:`palette.themes.theme_palette` to tell the two cases apart.
    """
    return theme_palette(text, rng).colors
