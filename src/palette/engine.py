from __future__ import annotations

"""Color conversion engine for HSL and RGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between RGB in [0, 1] and HSL with the hue
in degrees and saturation/lightness in percent.
"""

from typing import Protocol, Tuple


HSLTuple = Tuple[float, float, float]
RGB = Tuple[float, float, float]


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def rgb_to_hsl(self, r: float, g: float, b: float) -> HSLTuple: ...

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation of the cylindrical HSL model over sRGB."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        h_norm = (h % 360.0 + 360.0) % 360.0
        # -1e-15 % 360 rounds up to exactly 360.0
        return 0.0 if h_norm >= 360.0 else h_norm

    def rgb_to_hsl(self, r: float, g: float, b: float) -> HSLTuple:
        """Convert RGB in [0, 1] to HSL (h in degrees, s/l in [0, 100])."""
        c_max = max(r, g, b)
        c_min = min(r, g, b)
        l = (c_max + c_min) / 2.0

        if c_max == c_min:
            # Achromatic: hue is undefined, report 0.
            return (0.0, 0.0, l * 100.0)

        d = c_max - c_min
        s = d / (2.0 - c_max - c_min) if l > 0.5 else d / (c_max + c_min)

        if c_max == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif c_max == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0

        return (self.normalize_hue(h * 60.0), s * 100.0, l * 100.0)

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB:
        """Convert HSL (h in degrees, s/l in [0, 100]) to RGB in [0, 1]."""
        h_t = self.normalize_hue(h) / 360.0
        s_f = _clamp_pct(s) / 100.0
        l_f = _clamp_pct(l) / 100.0

        if s_f == 0.0:
            return (l_f, l_f, l_f)

        q = l_f * (1.0 + s_f) if l_f < 0.5 else l_f + s_f - l_f * s_f
        p = 2.0 * l_f - q
        r = _hue_to_channel(p, q, h_t + 1.0 / 3.0)
        g = _hue_to_channel(p, q, h_t)
        b = _hue_to_channel(p, q, h_t - 1.0 / 3.0)
        return (r, g, b)


def _clamp_pct(x: float) -> float:
    return max(0.0, min(100.0, x))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p
