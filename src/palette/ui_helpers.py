from __future__ import annotations

"""Helper utilities for integrating palettes into external UIs.

This module exposes label/enum pairs for the color-theory rules, maps a
color list onto the preview roles (primary, secondary, accent,
background, text) and formats saved palettes for display.
"""

from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Dict, List, Sequence

from .contrast import text_color_for
from .harmony import PaletteType
from .palette import Palette


# Label/Enum pairs for UI choices
PALETTE_TYPE_OPTIONS: List[tuple[str, PaletteType]] = [
    ("Monochromatic", PaletteType.MONOCHROMATIC),
    ("Analogous", PaletteType.ANALOGOUS),
    ("Complementary", PaletteType.COMPLEMENTARY),
    ("Triadic", PaletteType.TRIADIC),
    ("Tetradic", PaletteType.TETRADIC),
]

PALETTE_TYPE_LABEL_MAP: Dict[str, PaletteType] = {
    label: value for label, value in PALETTE_TYPE_OPTIONS
}

PREVIEW_ROLES = ("primary", "secondary", "accent", "background", "text")

UNTITLED_LABEL = "Custom Palette"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def theory_types() -> List[str]:
    """Return the names of all color-theory rules, in UI order."""
    return [t.value for _, t in PALETTE_TYPE_OPTIONS]


@dataclass(frozen=True)
class PreviewRoles:
    """Palette colors assigned to preview roles."""

    primary: str
    secondary: str
    accent: str
    background: str
    text: str

    def foreground_on(self, role: str) -> str:
        """Readable text color over the color assigned to ``role``."""
        return text_color_for(getattr(self, role))


def assign_preview_roles(colors: Sequence[str]) -> PreviewRoles:
    """Map ``colors`` onto :data:`PREVIEW_ROLES` by position.

    Short palettes reuse the first color for the missing roles.
    """
    if not colors:
        raise ValueError("cannot assign preview roles to an empty palette")
    picked = [colors[i] if i < len(colors) else colors[0] for i in range(len(PREVIEW_ROLES))]
    return PreviewRoles(*picked)


def palette_label(palette: Palette) -> str:
    return palette.theme or UNTITLED_LABEL


def format_created_at(palette: Palette, tz: tzinfo | None = None) -> str:
    """Format the creation date as e.g. ``"Jan 5, 2024"``.

    The date is taken in ``tz``, or in the local time zone when ``tz`` is
    None. Naive timestamps are read as UTC.
    """
    d = palette.created_at
    if d.tzinfo is None:
        d = d.replace(tzinfo=timezone.utc)
    d = d.astimezone(tz)
    return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"


__all__ = [
    "PALETTE_TYPE_OPTIONS",
    "PALETTE_TYPE_LABEL_MAP",
    "PREVIEW_ROLES",
    "UNTITLED_LABEL",
    "PreviewRoles",
    "theory_types",
    "assign_preview_roles",
    "palette_label",
    "format_created_at",
]
