from __future__ import annotations

"""Core color types and hex/HSL conversions.

Colors travel through the library as canonical ``"#rrggbb"`` strings.
This module converts them to and from :class:`HSL`, validating input on
entry, and owns the shared random generator used to draw base colors.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from common.settings import get as _get_settings
from util.color import parse_hex_color_str

from .engine import ColorEngine, DefaultColorEngine


_DEFAULT_ENGINE = DefaultColorEngine()
_RNG: np.random.Generator | None = None

MAX_COLOR = 0xFFFFFF


@dataclass(frozen=True)
class HSL:
    """Hue/saturation/lightness triple.

    Attributes
    ----------
    h:
        Hue angle in degrees, in [0, 360).
    s:
        Saturation in percent, in [0, 100].
    l:
        Lightness in percent, in [0, 100].
    """

    h: float
    s: float
    l: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.h, self.s, self.l))


def hex_to_hsl(color: str, engine: Optional[ColorEngine] = None) -> HSL:
    """Convert a hex color to HSL.

    Raises
    ------
    InvalidColorFormat
        If ``color`` is not a 6-digit hex string.
    """
    if engine is None:
        engine = _DEFAULT_ENGINE
    r, g, b = parse_hex_color_str(color)
    h, s, l = engine.rgb_to_hsl(r, g, b)
    return HSL(h, s, l)


def hsl_to_hex(h: float, s: float, l: float, engine: Optional[ColorEngine] = None) -> str:
    """Convert HSL to a lowercase ``"#rrggbb"`` string.

    The hue is wrapped into [0, 360) and saturation/lightness are clamped
    to [0, 100] before conversion.
    """
    if engine is None:
        engine = _DEFAULT_ENGINE
    r, g, b = engine.hsl_to_rgb(h, s, l)
    return f"#{_to_byte(r):02x}{_to_byte(g):02x}{_to_byte(b):02x}"


def _to_byte(x: float) -> int:
    # Half-up; builtin round() is half-to-even.
    return max(0, min(255, int(math.floor(x * 255.0 + 0.5))))


def default_rng() -> np.random.Generator:
    """Return the shared generator, seeding it from ``PALGEN_SEED`` on first use."""
    global _RNG
    if _RNG is None:
        _RNG = np.random.default_rng(_get_settings().RANDOM_SEED)
    return _RNG


def reseed(seed: int | None) -> None:
    """Replace the shared generator with one seeded by ``seed``."""
    global _RNG
    _RNG = np.random.default_rng(seed)


def random_color(rng: Optional[np.random.Generator] = None) -> str:
    """Draw a color uniformly over the full 24-bit RGB space."""
    if rng is None:
        rng = default_rng()
    value = int(rng.integers(0, MAX_COLOR, endpoint=True))
    return f"#{value:06x}"
