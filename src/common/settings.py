"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str


@dataclass
class _Settings:
    # 乱数（ベースカラー抽選）。None は OS エントロピー
    RANDOM_SEED: int | None = None

    # ロギング
    LOG_LEVEL: str = "INFO"

    # パレット保存先（未指定時は configs → ./data/palettes）
    STORE_DIR: str | None = None


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `PALGEN_SEED`: 非負整数。不正値は未指定扱い。
    - `PALGEN_LOG_LEVEL`: ロギングレベル名。
    - `PALGEN_STORE_DIR`: パレット保存ディレクトリ。
    """
    _settings.RANDOM_SEED = env_int("PALGEN_SEED", None, min_value=0)
    _settings.LOG_LEVEL = (env_str("PALGEN_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.STORE_DIR = env_str("PALGEN_STORE_DIR", None)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
