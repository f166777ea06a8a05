"""共通フィクスチャ。

- 乱数シード固定
- 構成キャッシュの破棄
- メモリ/一時ディレクトリ上のパレットストア
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from palette import JsonFileBackend, MemoryBackend, PaletteStore, reseed
from util.utils import load_config


@pytest.fixture(autouse=True)
def rng_seed() -> Iterator[None]:
    """ベースカラー抽選用の共有乱数を固定。"""
    reseed(12345)
    yield
    reseed(None)


@pytest.fixture()
def memory_store() -> PaletteStore:
    return PaletteStore(MemoryBackend(), key="savedPalettes")


@pytest.fixture()
def file_store(tmp_path: Path) -> PaletteStore:
    return PaletteStore(JsonFileBackend(tmp_path / "palettes"), key="savedPalettes")


@pytest.fixture(autouse=True)
def fresh_config() -> Iterator[None]:
    """テスト間で構成キャッシュを共有しない。"""
    load_config.cache_clear()
    yield
    load_config.cache_clear()
