"""
どこで: `util.paths`。
何を: パレット保存先ディレクトリの解決と生成ユーティリティを提供する。
なぜ: 保存先の優先順位（引数 → 環境変数 → 設定ファイル → 既定）を一箇所に集約するため。
"""

from __future__ import annotations

from pathlib import Path

from common.settings import get as _get_settings

from .utils import config_section


def resolve_palette_store_dir(state_dir: str | Path | None = None) -> Path:
    """パレット保存先ディレクトリを解決して返す（作成はしない）。

    優先順:
    1) 引数 `state_dir`
    2) 環境変数 `PALGEN_STORE_DIR`
    3) 設定 `palette_store.state_dir`
    4) カレントディレクトリ直下の `data/palettes`
    """
    if state_dir is not None and str(state_dir).strip():
        return Path(state_dir)
    env_dir = _get_settings().STORE_DIR
    if env_dir:
        return Path(env_dir)
    cfg_dir = config_section("palette_store").get("state_dir")
    if isinstance(cfg_dir, str) and cfg_dir.strip():
        return Path(cfg_dir)
    return Path.cwd() / "data" / "palettes"


def ensure_palette_store_dir(state_dir: str | Path | None = None) -> Path:
    """パレット保存先を解決し、存在しなければ作成して返す。

    - 親ディレクトリも同時に作成される。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    out = resolve_palette_store_dir(state_dir)
    out.mkdir(parents=True, exist_ok=True)
    return out


__all__ = ["resolve_palette_store_dir", "ensure_palette_store_dir"]
