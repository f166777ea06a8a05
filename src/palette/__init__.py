"""Public entrypoint for the palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules.
"""

from util.color import InvalidColorFormat

from .color_types import HSL, hex_to_hsl, hsl_to_hex, random_color, reseed
from .engine import ColorEngine, DefaultColorEngine
from .harmony import (
    PaletteType,
    analogous,
    complementary,
    monochromatic,
    tetradic,
    triadic,
)
from .themes import THEME_PALETTES, ThemeMatch, theme_names, theme_palette
from .contrast import is_light, text_color_for
from .palette import Palette, new_palette
from .store import JsonFileBackend, MemoryBackend, PaletteStore
from .api import generate_by_theme_name, generate_by_theory
from .ui_helpers import (
    PALETTE_TYPE_OPTIONS,
    PreviewRoles,
    assign_preview_roles,
    theory_types,
)

__all__ = [
    "InvalidColorFormat",
    "HSL",
    "hex_to_hsl",
    "hsl_to_hex",
    "random_color",
    "reseed",
    "ColorEngine",
    "DefaultColorEngine",
    "PaletteType",
    "monochromatic",
    "analogous",
    "complementary",
    "triadic",
    "tetradic",
    "THEME_PALETTES",
    "ThemeMatch",
    "theme_names",
    "theme_palette",
    "is_light",
    "text_color_for",
    "Palette",
    "new_palette",
    "PaletteStore",
    "JsonFileBackend",
    "MemoryBackend",
    "generate_by_theory",
    "generate_by_theme_name",
    "PALETTE_TYPE_OPTIONS",
    "PreviewRoles",
    "assign_preview_roles",
    "theory_types",
]
