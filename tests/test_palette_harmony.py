from __future__ import annotations

"""配色理論ルール（harmony）のテスト。"""

import pytest

from palette import (
    HSL,
    PaletteType,
    analogous,
    complementary,
    hex_to_hsl,
    monochromatic,
    tetradic,
    triadic,
)
from palette.harmony import generate_colors, generate_raw_colors

BASE = "#3366cc"  # h=220, s=60, l=50


def _hue_dist(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


def test_palette_type_from_value() -> None:
    assert PaletteType.from_value("Triadic") is PaletteType.TRIADIC
    assert PaletteType.from_value(" analogous ") is PaletteType.ANALOGOUS
    assert PaletteType.from_value(PaletteType.TETRADIC) is PaletteType.TETRADIC
    with pytest.raises(ValueError):
        PaletteType.from_value("split-complementary")


def test_monochromatic_shares_hue_and_saturation() -> None:
    colors = monochromatic(BASE, 5)
    assert len(colors) == 5
    base = hex_to_hsl(BASE)
    lightness = []
    for c in colors:
        hsl = hex_to_hsl(c)
        assert _hue_dist(hsl.h, base.h) <= 1.5
        assert hsl.s == pytest.approx(base.s, abs=1.5)
        lightness.append(hsl.l)
    assert lightness == sorted(lightness)
    assert lightness[0] == pytest.approx(20.0, abs=0.5)
    assert lightness[2] == pytest.approx(50.0, abs=0.5)
    assert lightness[-1] == pytest.approx(80.0, abs=0.5)


def test_monochromatic_clamps_lightness() -> None:
    raw = generate_raw_colors(PaletteType.MONOCHROMATIC, HSL(0.0, 50.0, 90.0), 5)
    assert [c.l for c in raw] == pytest.approx([60.0, 75.0, 90.0, 100.0, 100.0])
    raw = generate_raw_colors(PaletteType.MONOCHROMATIC, HSL(0.0, 50.0, 10.0), 3)
    assert [c.l for c in raw] == pytest.approx([0.0, 10.0, 40.0])


def test_monochromatic_count_edge_cases() -> None:
    assert monochromatic("#3366CC", 1) == ["#3366cc"]
    assert len(monochromatic(BASE, 2)) == 2
    assert len(monochromatic(BASE, 9)) == 9
    with pytest.raises(ValueError):
        monochromatic(BASE, 0)


def test_analogous_hue_window() -> None:
    raw = generate_raw_colors(PaletteType.ANALOGOUS, HSL(10.0, 60.0, 50.0), 5)
    assert [c.h for c in raw] == pytest.approx([340.0, 355.0, 10.0, 25.0, 40.0])
    assert all(c.s == 60.0 and c.l == 50.0 for c in raw)
    assert all(0.0 <= c.h < 360.0 for c in raw)


def test_analogous_hex_output() -> None:
    colors = analogous(BASE)
    assert len(colors) == 5
    hues = [hex_to_hsl(c).h for c in colors]
    for got, want in zip(hues, [190.0, 205.0, 220.0, 235.0, 250.0]):
        assert _hue_dist(got, want) <= 1.0
    assert analogous(BASE, 1) == [BASE]


def test_complementary_structure() -> None:
    colors = complementary("#3366CC")
    assert len(colors) == 5
    assert colors[0] == BASE
    base = hex_to_hsl(BASE)
    assert hex_to_hsl(colors[1]).l == pytest.approx(base.l - 20.0, abs=0.5)
    assert hex_to_hsl(colors[2]).l == pytest.approx(base.l + 20.0, abs=0.5)
    assert _hue_dist(hex_to_hsl(colors[3]).h, (base.h + 180.0) % 360.0) <= 1.0
    assert _hue_dist(hex_to_hsl(colors[4]).h, (base.h + 180.0) % 360.0) <= 1.5
    assert hex_to_hsl(colors[4]).l == pytest.approx(base.l - 20.0, abs=0.5)


def test_complementary_raw_clamps_each_step() -> None:
    raw = generate_raw_colors(PaletteType.COMPLEMENTARY, HSL(300.0, 40.0, 90.0))
    assert [c.h for c in raw] == pytest.approx([300.0, 300.0, 300.0, 120.0, 120.0])
    assert [c.l for c in raw] == pytest.approx([90.0, 70.0, 100.0, 90.0, 70.0])


def test_triadic_structure() -> None:
    raw = generate_raw_colors(PaletteType.TRIADIC, HSL(200.0, 50.0, 15.0))
    assert [c.h for c in raw] == pytest.approx([200.0, 320.0, 80.0, 200.0, 320.0])
    assert [c.l for c in raw] == pytest.approx([15.0, 15.0, 15.0, 0.0, 0.0])
    colors = triadic(BASE)
    assert len(colors) == 5 and colors[0] == BASE


def test_tetradic_structure() -> None:
    raw = generate_raw_colors(PaletteType.TETRADIC, HSL(300.0, 95.0, 40.0))
    assert [c.h for c in raw] == pytest.approx([300.0, 30.0, 120.0, 210.0, 300.0])
    assert [c.s for c in raw] == pytest.approx([95.0, 95.0, 95.0, 95.0, 100.0])
    colors = tetradic(BASE)
    assert len(colors) == 5 and colors[0] == BASE


@pytest.mark.parametrize(
    "palette_type",
    [PaletteType.COMPLEMENTARY, PaletteType.TRIADIC, PaletteType.TETRADIC],
)
def test_fixed_rules_ignore_count(palette_type: PaletteType) -> None:
    assert len(generate_colors(palette_type, BASE, count=2)) == 5
    assert len(generate_colors(palette_type, BASE, count=0)) == 5


def test_generated_colors_are_canonical() -> None:
    for t in PaletteType:
        for c in generate_colors(t, "#A1B2C3"):
            assert len(c) == 7 and c.startswith("#") and c == c.lower()
