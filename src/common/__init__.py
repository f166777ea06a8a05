"""
どこで: `common` パッケージ。
何を: palette/util 双方で使う軽量基盤（環境設定・ロギング）。
なぜ: ドメイン層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .settings import get as get_settings
from .settings import reload_from_env

__all__ = [
    "get_settings",
    "reload_from_env",
    "setup_default_logging",
]
