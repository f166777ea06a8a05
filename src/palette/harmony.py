from __future__ import annotations

"""Color-theory rules and palette skeleton generation.

This module defines :class:`PaletteType` and the logic to compute the raw
HSL colors for each rule, plus one convenience function per rule that
returns hex colors directly.
"""

from enum import Enum
from typing import List, Optional

import numpy as np

from util.color import normalize_hex

from .color_types import HSL, hex_to_hsl, hsl_to_hex
from .engine import ColorEngine, DefaultColorEngine


DEFAULT_COUNT = 5

# Monochromatic: lightness swept across l +/- half of this span.
LIGHTNESS_SPAN = 60.0
# Analogous: hue swept across h +/- half of this window.
HUE_WINDOW = 60.0
# Darker/lighter variants in the fixed-rule palettes.
SHADE_STEP = 20.0
SATURATION_BOOST = 10.0


class PaletteType(Enum):
    """Color-theory rules used to derive a palette from one base color."""

    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"

    @classmethod
    def from_value(cls, value: "PaletteType | str") -> "PaletteType":
        """Resolve an enum member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for t in cls:
            if t.value == key:
                return t
        raise ValueError(f"Unknown palette type: {value}")

    @property
    def is_sampled(self) -> bool:
        """True for rules whose length follows the requested count."""
        return self in (PaletteType.MONOCHROMATIC, PaletteType.ANALOGOUS)


def _clamp_pct(x: float) -> float:
    return max(0.0, min(100.0, float(x)))


def _sweep(center: float, span: float, count: int) -> np.ndarray:
    return np.linspace(center - span / 2.0, center + span / 2.0, count)


def generate_raw_colors(
    palette_type: PaletteType,
    base: HSL,
    count: int = DEFAULT_COUNT,
    engine: Optional[ColorEngine] = None,
) -> List[HSL]:
    """Generate the HSL skeleton for ``palette_type``.

    ``count`` only applies to the sampled rules (monochromatic, analogous);
    the other rules always produce five colors with the base first.
    Lightness and saturation are clamped per step; hues are wrapped
    into [0, 360).
    """
    if engine is None:
        engine = DefaultColorEngine()
    h0, s0, l0 = base
    hue = engine.normalize_hue

    if palette_type.is_sampled:
        if count <= 0:
            raise ValueError("count must be positive.")
        if count == 1:
            return [HSL(h0, s0, l0)]

    if palette_type == PaletteType.MONOCHROMATIC:
        return [HSL(h0, s0, _clamp_pct(l)) for l in _sweep(l0, LIGHTNESS_SPAN, count)]

    if palette_type == PaletteType.ANALOGOUS:
        return [HSL(hue(float(h)), s0, l0) for h in _sweep(h0, HUE_WINDOW, count)]

    if palette_type == PaletteType.COMPLEMENTARY:
        comp = hue(h0 + 180.0)
        return [
            HSL(h0, s0, l0),
            HSL(h0, s0, _clamp_pct(l0 - SHADE_STEP)),
            HSL(h0, s0, _clamp_pct(l0 + SHADE_STEP)),
            HSL(comp, s0, l0),
            HSL(comp, s0, _clamp_pct(l0 - SHADE_STEP)),
        ]

    if palette_type == PaletteType.TRIADIC:
        triad1 = hue(h0 + 120.0)
        triad2 = hue(h0 + 240.0)
        return [
            HSL(h0, s0, l0),
            HSL(triad1, s0, l0),
            HSL(triad2, s0, l0),
            HSL(h0, s0, _clamp_pct(l0 - SHADE_STEP)),
            HSL(triad1, s0, _clamp_pct(l0 - SHADE_STEP)),
        ]

    if palette_type == PaletteType.TETRADIC:
        return [
            HSL(h0, s0, l0),
            HSL(hue(h0 + 90.0), s0, l0),
            HSL(hue(h0 + 180.0), s0, l0),
            HSL(hue(h0 + 270.0), s0, l0),
            HSL(h0, _clamp_pct(s0 + SATURATION_BOOST), l0),
        ]

    raise ValueError(f"Unsupported PaletteType: {palette_type}")


def generate_colors(
    palette_type: PaletteType,
    base_color: str,
    count: int = DEFAULT_COUNT,
    engine: Optional[ColorEngine] = None,
) -> List[str]:
    """Generate hex colors for ``palette_type`` from ``base_color``.

    Where the rule keeps the base color unchanged (the fixed rules, and a
    single-sample sweep) the base is emitted as given, in canonical form,
    rather than round-tripped through HSL.
    """
    base_hex = normalize_hex(base_color)
    raw = generate_raw_colors(palette_type, hex_to_hsl(base_hex, engine), count, engine)
    colors = [hsl_to_hex(h, s, l, engine) for h, s, l in raw]
    if not palette_type.is_sampled or len(colors) == 1:
        colors[0] = base_hex
    return colors


def monochromatic(base_color: str, count: int = DEFAULT_COUNT) -> List[str]:
    """Same hue and saturation, lightness swept from l-30 to l+30."""
    return generate_colors(PaletteType.MONOCHROMATIC, base_color, count)


def analogous(base_color: str, count: int = DEFAULT_COUNT) -> List[str]:
    """Hues spread over a 60 degree window centred on the base hue."""
    return generate_colors(PaletteType.ANALOGOUS, base_color, count)


def complementary(base_color: str) -> List[str]:
    return generate_colors(PaletteType.COMPLEMENTARY, base_color)


def triadic(base_color: str) -> List[str]:
    return generate_colors(PaletteType.TRIADIC, base_color)


def tetradic(base_color: str) -> List[str]:
    return generate_colors(PaletteType.TETRADIC, base_color)
