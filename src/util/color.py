"""
どこで: `util.color`。
何を: 色指定の検証/正規化/変換（Hex, RGB 0–1, RGB 0–255）を一元化。
なぜ: palette 層全体で同一の受理仕様とエラー型（`InvalidColorFormat`）を提供するため。
"""

from __future__ import annotations

from typing import Sequence


class InvalidColorFormat(ValueError):
    """色文字列/タプルが受理形式に合わない場合に送出する。"""


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def _strip_hex_prefix(s: str) -> str:
    t = s.strip()
    if t.startswith("#"):
        return t[1:]
    if t.lower().startswith("0x"):
        return t[2:]
    return t


def parse_hex_color_str(s: str) -> tuple[float, float, float]:
    """Hex 文字列から RGB(0–1) を返す。

    受理形式: "#RRGGBB", "0xRRGGBB", "RRGGBB"。大文字/小文字は不問。
    アルファ付き（8 桁）や短縮形（3 桁）は受理しない。
    """
    if not isinstance(s, str):
        raise InvalidColorFormat(f"hex color must be a string: {s!r}")
    t = _strip_hex_prefix(s)
    if len(t) != 6:
        raise InvalidColorFormat(f"invalid hex color length: '{s}' (expected RRGGBB)")
    # int(..., 16) は "+f" や "_" を許すため、文字集合で先に弾く
    if any(ch not in "0123456789abcdefABCDEF" for ch in t):
        raise InvalidColorFormat(f"invalid hex color: '{s}'")
    r = int(t[0:2], 16)
    g = int(t[2:4], 16)
    b = int(t[4:6], 16)
    return (r / 255.0, g / 255.0, b / 255.0)


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    return None


def normalize_color(value: object) -> tuple[float, float, float]:
    """色を RGB(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b) （0–1 または 0–255）
    - 返値: (r,g,b) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_sequence(value)
    if seq is None:
        raise InvalidColorFormat(f"unsupported color type: {type(value)!r}")
    if len(seq) != 3:
        raise InvalidColorFormat("color tuple/list must be length 3")
    try:
        fseq = [float(seq[0]), float(seq[1]), float(seq[2])]
    except (TypeError, ValueError) as e:
        raise InvalidColorFormat(f"invalid color tuple/list: {value!r}") from e
    # 全要素が 0..1 ならそのまま
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b = fseq
        return (_clamp01(r), _clamp01(g), _clamp01(b))
    # それ以外は 0–255 とみなし、整数丸め → 0–1 へスケール
    r_i, g_i, b_i = (max(0, min(255, int(round(x)))) for x in fseq)
    return (r_i / 255.0, g_i / 255.0, b_i / 255.0)


def to_u8_rgb(value: object) -> tuple[int, int, int]:
    """色を RGB(0–255) へ変換する。"""
    r, g, b = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def normalize_hex(value: object) -> str:
    """色を正規形 "#rrggbb"（小文字）へ変換する。"""
    r, g, b = to_u8_rgb(value)
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "InvalidColorFormat",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgb",
    "normalize_hex",
]
